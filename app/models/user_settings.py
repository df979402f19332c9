# app/models/user_settings.py

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from uuid import UUID
from typing import Optional
from datetime import datetime

from app.models.common import utcnow

class UserSettings(SQLModel, table=True):
    __tablename__ = "user_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", unique=True)  # una fila por usuario
    monthly_budget: float
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
