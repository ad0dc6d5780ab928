from typing import Optional
from dataclasses import dataclass

from ..ports.user_repo import UserRepository
from ...config import Settings
from ...utils import create_jwt_token


@dataclass
class AuthService:
    user_repo: UserRepository
    settings: Settings

    def issue_token(self, email: str) -> Optional[str]:
        """Sign a token for a registered email, or return None for strangers."""
        user = self.user_repo.get_by_email(email)
        if not user:
            return None
        return create_jwt_token({"email": email}, self.settings)
