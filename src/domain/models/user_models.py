# user_models.py
from pydantic import BaseModel, ConfigDict

from domain.entities.user_classes import RoleType
from domain.models.schema import FieldSpec, STRING, INTEGER

EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"

USER_SCHEMA = {
    "name": FieldSpec(STRING, required=True),
    "email": FieldSpec(STRING, required=True, unique=True, pattern=EMAIL_PATTERN),
    "role": FieldSpec(STRING, required=True, enum=tuple(role.value for role in RoleType)),
    "username": FieldSpec(STRING, required=True, unique=True),
    "password": FieldSpec(STRING, required=True),
    "company": FieldSpec(INTEGER),
}

class UserRead(BaseModel):
    """Public user representation, the password hash is never part of it."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: RoleType
    username: str
    company: int | None = None

class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None

class TokenPayload(BaseModel):
    sub: str  # user id
    name: str | None = None
    role: RoleType
    company: int | None = None
