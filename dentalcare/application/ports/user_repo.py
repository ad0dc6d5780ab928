from typing import List, Optional, Protocol, Tuple


class UserDto:
    def __init__(self, id: str, email: str, name: Optional[str], role: Optional[str]):
        self.id = id
        self.email = email
        self.name = name
        self.role = role

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class UserRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[UserDto]:
        ...

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        ...

    def list_all(self) -> List[UserDto]:
        ...

    def create(self, email: str, name: Optional[str]) -> UserDto:
        ...

    def set_role(self, user_id: str, role: str) -> Tuple[int, int]:
        """Returns (matched, modified) counts."""
        ...
