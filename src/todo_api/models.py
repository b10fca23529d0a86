from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class Todo(BaseModel):
    """
    A single task record, as held in memory, persisted to the store file and
    returned by the API.

    Fields:
    - id: String form of a random UUID, assigned on creation
    - title: Short title, trimmed and non-empty
    - completed: Boolean completion flag
    - created_at: Creation timestamp (UTC), never changed afterwards
    - completed_at: Set when the todo is marked completed, null otherwise
    - priority: One of '', 'low', 'medium', 'high'
    - notes: Free-form notes
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "1b4e28ba-2fa1-41d2-883f-0016d3cca427",
                "title": "Buy milk",
                "completed": False,
                "created_at": "2025-01-25T10:15:30.123456Z",
                "completed_at": None,
                "priority": "high",
                "notes": "Semi-skimmed",
            }
        }
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(default=False, description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp")
    completed_at: Optional[datetime] = Field(default=None, description="Completion timestamp")
    priority: str = Field(default="", description="Priority: '', 'low', 'medium' or 'high'")
    notes: str = Field(default="", description="Free-form notes")


Todos = List[Todo]
