from pydantic import BaseModel, EmailStr, Field
from uuid import UUID

class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserRead(BaseModel):
    id: UUID
    email: EmailStr

    class Config:
        from_attributes = True  # permite serializar objetos ORM
