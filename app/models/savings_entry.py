# app/models/savings_entry.py

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from uuid import UUID
from datetime import datetime

from app.models.common import new_id, utcnow

class SavingsEntry(SQLModel, table=True):
    __tablename__ = "savings_history"

    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    # Copia del nombre: la suscripción puede ya no existir
    subscription_name: str
    monthly_savings: float
    saved_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), index=True)
