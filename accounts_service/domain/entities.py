from dataclasses import dataclass

ROLE_TEACHER = "teacher"
ROLE_STUDENT = "student"
ALLOWED_ROLES = (ROLE_TEACHER, ROLE_STUDENT)
DEFAULT_ROLE = ROLE_STUDENT


@dataclass(frozen=True)
class Account:
    id: int | None
    first_name: str
    last_name: str
    email: str
    role: str = DEFAULT_ROLE
    password_hash: str | None = None
