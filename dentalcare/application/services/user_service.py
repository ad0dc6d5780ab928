from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..ports.user_repo import UserRepository, UserDto
from ...exceptions import DuplicateRecordError

ADMIN_ROLE = "admin"


@dataclass
class UserService:
    user_repo: UserRepository

    def register(self, email: str, name: Optional[str]) -> Optional[UserDto]:
        """Create a user; returns None when the email is already registered."""
        if self.user_repo.get_by_email(email):
            return None
        try:
            return self.user_repo.create(email, name)
        except DuplicateRecordError:
            return None

    def list_users(self) -> List[UserDto]:
        return self.user_repo.list_all()

    def promote_to_admin(self, user_id: str) -> Tuple[int, int]:
        return self.user_repo.set_role(user_id, ADMIN_ROLE)

    def is_admin(self, email: str) -> bool:
        user = self.user_repo.get_by_email(email)
        return bool(user and user.is_admin)
