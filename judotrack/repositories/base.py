from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from judotrack.core.exceptions import NotFoundError
from judotrack.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class BaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType], owner_field: str = "user_id"):
        """
        Repository con operaciones CRUD por defecto y filtro opcional por propietario.
        """
        self.model = model
        self.owner_field = owner_field

    def _owned(self) -> bool:
        return hasattr(self.model, self.owner_field)

    def _commit(self, db: Session, db_obj: Optional[ModelType] = None) -> None:
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        if db_obj is not None:
            db.refresh(db_obj)

    def get(self, db: Session, id: Any, user_id: Optional[int] = None) -> Optional[ModelType]:
        """
        Obtener un objeto por su ID con filtro opcional de propietario.

        Args:
            db: Sesión de base de datos
            id: ID del objeto a obtener
            user_id: ID opcional del usuario propietario

        Returns:
            El objeto solicitado o None si no existe (o pertenece a otro usuario)
        """
        query = db.query(self.model).filter(self.model.id == id)

        if user_id is not None and self._owned():
            query = query.filter(getattr(self.model, self.owner_field) == user_id)

        return query.first()

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100,
        filters: Optional[Dict[str, Any]] = None, order_by: Optional[str] = None,
        descending: bool = True
    ) -> List[ModelType]:
        """
        Obtener múltiples registros con filtros opcionales.

        Args:
            db: Sesión de base de datos
            skip: Número de registros a omitir (paginación)
            limit: Número máximo de registros a devolver
            filters: Diccionario de filtros adicionales {campo: valor}
            order_by: Campo por el que ordenar (se ignora si el modelo no lo tiene)
            descending: Orden descendente si es True

        Returns:
            Lista de objetos que coinciden con los criterios
        """
        query = db.query(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.filter(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            column = getattr(self.model, order_by)
            query = query.order_by(column.desc() if descending else column.asc(), self.model.id.desc())
        else:
            query = query.order_by(self.model.id.asc())

        return query.offset(skip).limit(limit).all()

    def get_multi_by_user(
        self, db: Session, *, user_id: int, skip: int = 0, limit: int = 100,
        order_by: Optional[str] = None, descending: bool = True
    ) -> List[ModelType]:
        """Registros de un usuario concreto."""
        return self.get_multi(
            db, skip=skip, limit=limit, filters={self.owner_field: user_id},
            order_by=order_by, descending=descending
        )

    def create(self, db: Session, *, obj_in: CreateSchemaType, user_id: Optional[int] = None) -> ModelType:
        """
        Crear un nuevo registro asignando el propietario si se indica.

        Args:
            db: Sesión de base de datos
            obj_in: Datos del objeto a crear
            user_id: ID opcional del usuario propietario

        Returns:
            El objeto creado
        """
        if hasattr(obj_in, 'model_dump'):
            obj_in_data = obj_in.model_dump()
        else:
            obj_in_data = dict(obj_in)

        if user_id is not None and self._owned():
            obj_in_data[self.owner_field] = user_id

        db_obj = self.model(**obj_in_data)
        db.add(db_obj)
        self._commit(db, db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Actualizar parcialmente un registro: solo se tocan los campos enviados.

        Args:
            db: Sesión de base de datos
            db_obj: Objeto existente a actualizar
            obj_in: Datos de actualización

        Returns:
            El objeto actualizado
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            # El propietario no se cambia por update
            if field in ("id", self.owner_field):
                continue
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        self._commit(db, db_obj)
        return db_obj

    def remove(self, db: Session, *, id: int, user_id: Optional[int] = None) -> ModelType:
        """
        Eliminar un registro con verificación opcional de propietario.

        Raises:
            NotFoundError: Si el objeto no existe o pertenece a otro usuario
        """
        obj = self.get(db, id=id, user_id=user_id)
        if not obj:
            raise NotFoundError(f"Objeto con ID {id} no encontrado")

        db.delete(obj)
        self._commit(db)
        return obj

    def exists(self, db: Session, id: int, user_id: Optional[int] = None) -> bool:
        query = db.query(self.model.id).filter(self.model.id == id)

        if user_id is not None and self._owned():
            query = query.filter(getattr(self.model, self.owner_field) == user_id)

        return db.query(query.exists()).scalar()

    def count_by_user(self, db: Session, user_id: int) -> int:
        return db.query(self.model).filter(getattr(self.model, self.owner_field) == user_id).count()
