from typing import List, Optional, Tuple
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import User
from .....application.ports.user_repo import UserRepository, UserDto
from .....exceptions import DuplicateRecordError


class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, user: User) -> UserDto:
        return UserDto(
            id=user.id,
            email=user.email,
            name=getattr(user, 'name', None),
            role=getattr(user, 'role', None),
        )

    def get_by_email(self, email: str) -> Optional[UserDto]:
        user = self.session.exec(select(User).where(User.email == email)).first()
        return self._to_dto(user) if user else None

    def get_by_id(self, user_id: str) -> Optional[UserDto]:
        user = self.session.exec(select(User).where(User.id == user_id)).first()
        return self._to_dto(user) if user else None

    def list_all(self) -> List[UserDto]:
        users = self.session.exec(select(User).order_by(User.created_at)).all()
        return [self._to_dto(u) for u in users]

    def create(self, email: str, name: Optional[str]) -> UserDto:
        user = User(email=email, name=name)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateRecordError(str(e)) from e
        self.session.refresh(user)
        return self._to_dto(user)

    def set_role(self, user_id: str, role: str) -> Tuple[int, int]:
        user = self.session.exec(select(User).where(User.id == user_id)).first()
        if not user:
            return 0, 0
        if user.role == role:
            return 1, 0
        user.role = role
        self.session.add(user)
        self.session.commit()
        return 1, 1
