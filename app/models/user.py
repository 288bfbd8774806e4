from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    id: str = Field(..., alias="_id")
    username: str
    password_hash: Optional[str] = None

    first_name: str
    last_name: str
    email: str

    created_at: datetime
    is_admin: bool = False

    class Config:
        populate_by_name = True


class UserCreate(BaseModel):
    """Datos de registro"""

    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: str = Field(..., min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+$")
    is_admin: bool = False


class UserUpdate(BaseModel):
    """Actualización parcial: solo se cambian los campos enviados"""

    password: Optional[str] = Field(None, min_length=5, max_length=128)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[str] = Field(None, min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+$")


class UserResponse(BaseModel):
    id: str
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool = False

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            is_admin=user.is_admin,
        )
