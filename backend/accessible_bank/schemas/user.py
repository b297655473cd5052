from pydantic import BaseModel, EmailStr, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime

class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str

    @field_validator("name")
    @classmethod
    def name_trim(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("name is required")
        if len(v) > 128:
            raise ValueError("name too long")
        return v

    @field_validator("email")
    @classmethod
    def email_normalize(cls, v: str):
        return str(v).strip().lower()

    @field_validator("password")
    @classmethod
    def password_min(cls, v: str):
        v = str(v)
        if len(v) < 6:
            raise ValueError("password must be at least 6 characters")
        return v

class UserOut(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
