from typing import Optional

from sqlalchemy.orm import Session

from app.models.user import User
from app.repositories.base import BaseRepository
from app.schemas.user import UserCreate, UserUpdate


class UserRepository(BaseRepository[User, UserCreate, UserUpdate]):
    def email_taken(self, db: Session, *, email: str, exclude_user_id: Optional[int] = None) -> bool:
        """
        Indica si el email ya pertenece a algún usuario distinto de exclude_user_id.
        """
        query = db.query(User.id).filter(User.email == email)
        if exclude_user_id is not None:
            query = query.filter(User.id != exclude_user_id)
        return db.query(query.exists()).scalar()


user_repository = UserRepository(User)
