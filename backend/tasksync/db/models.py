import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from ..services.dates import utcnow

class Task(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    uid: str = Field(index=True, nullable=False)
    title: str
    description: Optional[str] = None
    hex_color: Optional[str] = None
    due_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
