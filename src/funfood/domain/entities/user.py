"""User entity mirrored from the authentication API."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class UserRole(Enum):
    """Account roles known to the backend."""
    CUSTOMER = "customer"
    ADMIN = "admin"
    MANAGER = "manager"
    SHIPPER = "shipper"


@dataclass(frozen=True)
class User:
    """Authenticated user record."""

    id: int
    name: str = ""
    email: str = ""
    phone: str = ""
    avatar: str = ""
    role: UserRole = UserRole.CUSTOMER
    is_active: bool = True
    created_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API's camelCase payload."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "avatar": self.avatar,
            "role": self.role.value,
            "isActive": self.is_active,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Build a user from the API's camelCase payload.

        Raises:
            KeyError: If ``id`` is missing
            ValueError: If ``role`` is not a known role
        """
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
            avatar=data.get("avatar", ""),
            role=UserRole(data.get("role", UserRole.CUSTOMER.value)),
            is_active=bool(data.get("isActive", True)),
            created_at=data.get("createdAt", ""),
        )
