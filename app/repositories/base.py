from typing import Any, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        Repository con operaciones CRUD por defecto.

        Las operaciones de escritura aceptan `commit=False` para que un
        servicio pueda agrupar varias escrituras en una sola transacción.
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Obtener un objeto por su ID.

        Args:
            db: Sesión de base de datos
            id: ID del objeto a obtener

        Returns:
            El objeto solicitado o None si no existe
        """
        return db.query(self.model).filter(self.model.id == id).first()

    def get_for_update(self, db: Session, id: Any) -> Optional[ModelType]:
        """
        Obtener un objeto bloqueando su fila (SELECT ... FOR UPDATE) hasta el
        final de la transacción. SQLite ignora FOR UPDATE y no serializa.
        """
        return db.query(self.model).filter(self.model.id == id).with_for_update().first()

    def create(
        self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], commit: bool = True
    ) -> ModelType:
        """
        Crear un nuevo registro.

        Args:
            db: Sesión de base de datos
            obj_in: Datos del objeto a crear (schema o diccionario)
            commit: Si es False sólo se hace flush y el llamador confirma la transacción

        Returns:
            El objeto creado
        """
        # model_dump() preserva datetime y Decimal tal cual
        if isinstance(obj_in, dict):
            obj_in_data = dict(obj_in)
        else:
            obj_in_data = obj_in.model_dump()

        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        if commit:
            db.commit()
            db.refresh(db_obj)
        else:
            db.flush()
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
        commit: bool = True
    ) -> ModelType:
        """
        Actualizar un registro con los campos presentes en `obj_in`.

        Con un schema sólo se aplican los campos enviados explícitamente
        (exclude_unset), de modo que un None explícito sí se escribe.

        Args:
            db: Sesión de base de datos
            db_obj: Objeto existente a actualizar
            obj_in: Datos de actualización
            commit: Si es False sólo se hace flush

        Returns:
            El objeto actualizado
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        if commit:
            db.commit()
            db.refresh(db_obj)
        else:
            db.flush()
        return db_obj

    def exists(self, db: Session, id: int) -> bool:
        """
        Verificar si un objeto existe.

        Args:
            db: Sesión de base de datos
            id: ID del objeto a verificar

        Returns:
            True si el objeto existe, False en caso contrario
        """
        query = db.query(self.model.id).filter(self.model.id == id)
        return db.query(query.exists()).scalar()
