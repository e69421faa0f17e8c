from typing import Optional
import logging

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ConflictError
from app.core.timezone_utils import Clock, utc_now
from app.db.transaction import store_transaction
from app.models.user import User as UserModel
from app.repositories.user import user_repository
from app.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__) # Logger a nivel de módulo


class UserService:

    def __init__(self, clock: Clock = utc_now):
        self.clock = clock

    def create_user(self, db: Session, user_in: UserCreate) -> UserModel:
        """
        Registrar un nuevo usuario.

        Raises:
            ConflictError: si el email ya está registrado
        """
        with store_transaction(db, "create_user"):
            if user_repository.email_taken(db, email=user_in.email):
                raise ConflictError(f"Email {user_in.email} is already registered")

            now = self.clock()
            data = user_in.model_dump()
            data.update({"created_at": now, "updated_at": now})
            user = user_repository.create(db, obj_in=data)

        logger.info(f"Usuario creado: {user.email} (ID: {user.id})")
        return user

    def get_user(self, db: Session, user_id: int) -> Optional[UserModel]:
        return user_repository.get(db, user_id)

    def update_user(self, db: Session, *, user_id: int, user_in: UserUpdate) -> UserModel:
        """
        Actualizar los campos enviados de un usuario.

        Raises:
            NotFoundError: si el usuario no existe
            ConflictError: si el nuevo email pertenece a otro usuario
        """
        with store_transaction(db, "update_user"):
            user = user_repository.get(db, user_id)
            if not user:
                raise NotFoundError(f"User with id {user_id} not found")

            update_data = user_in.model_dump(exclude_unset=True)
            new_email = update_data.get("email")
            if new_email and user_repository.email_taken(db, email=new_email, exclude_user_id=user_id):
                raise ConflictError(f"Email {new_email} is already registered")

            update_data["updated_at"] = self.clock()
            user = user_repository.update(db, db_obj=user, obj_in=update_data)

        logger.info(f"Usuario {user_id} actualizado: {sorted(update_data)}")
        return user


user_service = UserService()
