from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

class LoginIn(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_normalize(cls, v: str):
        return v.strip().lower()

class TokenOut(BaseModel):
    token: str
    token_type: str = "bearer"

    class Config:
        alias_generator = to_camel
        populate_by_name = True
