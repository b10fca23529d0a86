from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ALLOWED_PRIORITIES = ("low", "medium", "high")

TITLE_REQUIRED = "Title is required"
INVALID_PRIORITY = "Invalid priority. Allowed values are: " + ", ".join(ALLOWED_PRIORITIES)
EMPTY_PATCH = "At least one field must be updated"


def normalize_priority(value: str) -> str:
    """
    Lowercase a priority and check it against the allowed set.
    Raises ValueError for anything else, including the empty string.
    """
    normalized = value.lower()
    if normalized not in ALLOWED_PRIORITIES:
        raise ValueError(INVALID_PRIORITY)
    return normalized


def _require_title(value: Optional[str]) -> str:
    s = (value or "").strip()
    if not s:
        raise ValueError(TITLE_REQUIRED)
    return s


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    Unknown fields, including client-supplied 'id' and 'created_at', are ignored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "priority": "High",
                "notes": "Semi-skimmed",
                "completed": False,
            }
        }
    )

    title: Optional[str] = Field(default="", validate_default=True, description="Short title for the todo item")
    completed: Optional[bool] = Field(default=False, strict=True, description="Completion status flag")
    priority: Optional[str] = Field(default="", description="Priority: low, medium or high (case-insensitive)")
    notes: Optional[str] = Field(default="", description="Free-form notes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        """
        Strip whitespace and require a non-empty title.
        """
        return _require_title(v)

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: Optional[str]) -> str:
        """
        Empty means unset; anything else is normalized to lowercase and checked.
        """
        if not v:
            return ""
        return normalize_priority(v)

    @field_validator("completed")
    @classmethod
    def default_completed(cls, v: Optional[bool]) -> bool:
        return bool(v)

    @field_validator("notes")
    @classmethod
    def default_notes(cls, v: Optional[str]) -> str:
        return v or ""


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided fields will be updated. A field sent
    as JSON null counts as not provided.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy oat milk",
                "completed": True,
                "priority": "low",
                "notes": "",
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Short title for the todo item")
    completed: Optional[bool] = Field(default=None, strict=True, description="Completion status flag")
    priority: Optional[str] = Field(default=None, description="Priority: low, medium or high (case-insensitive)")
    notes: Optional[str] = Field(default=None, description="Free-form notes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """
        If title is provided, strip whitespace and require it to be non-empty.
        """
        if v is None:
            return v
        return _require_title(v)

    @field_validator("priority")
    @classmethod
    def validate_priority(cls, v: Optional[str]) -> Optional[str]:
        """
        If priority is provided it must be one of the allowed values; it cannot
        be cleared back to unset.
        """
        if v is None:
            return v
        return normalize_priority(v)

    @model_validator(mode="after")
    def require_some_field(self) -> "TodoUpdate":
        if not self.provided_fields():
            raise ValueError(EMPTY_PATCH)
        return self

    def provided_fields(self) -> Dict[str, Any]:
        """Return the fields present in the request body with a non-null value."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }
