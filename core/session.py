from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        user_id = data.get("_id", data.get("id"))
        email = data.get("email")
        if user_id is None or not email:
            raise ValueError("user record without id/email")
        return cls(id=str(user_id), name=str(data.get("name") or ""), email=str(email))

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class Session:
    user: User
    token: str


@dataclass(frozen=True)
class SessionEvent:
    """Emitted after login/register/logout; navigate_to is "dashboard" or "login"."""

    kind: str
    navigate_to: str
