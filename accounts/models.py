# accounts/models.py

from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class Identity:
    """
    Who the current session belongs to.
    Built from a core_models.User row; never carries the password hash.
    """
    id: int
    username: str
    role: str
    name: Optional[str] = None

    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, username=user.username, role=user.role, name=user.name)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_engineer(self) -> bool:
        return self.role == "engineer"
