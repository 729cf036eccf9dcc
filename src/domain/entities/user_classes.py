# user_classes.py
from dataclasses import dataclass
from enum import Enum

class RoleType(str, Enum):
    admin = "admin"
    manager = "manager"
    employee = "employee"

@dataclass(frozen=True)
class CurrentUser:
    id: int
    role: RoleType
    company: int | None = None
    name: str | None = None
