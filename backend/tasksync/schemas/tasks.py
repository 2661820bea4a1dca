import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

# Date-like fields stay untyped here: they are normalized inside the store
# boundary so a bad value is an internal failure, not a validation error.
class TaskIn(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    hex_color: Optional[str] = None
    due_at: Any = None

class TaskUpdate(TaskIn):
    pass

class TaskSyncIn(TaskIn):
    id: Any = None
    created_at: Any = None
    updated_at: Any = None

class TaskOut(CamelModel):
    id: uuid.UUID
    uid: str
    title: str
    description: Optional[str] = None
    hex_color: Optional[str] = None
    due_at: datetime
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("due_at", "created_at", "updated_at")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        # SQLite drops the offset on read; values are written as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

class TaskDeleted(BaseModel):
    success: bool = True
    id: uuid.UUID
