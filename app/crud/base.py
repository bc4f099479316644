from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """Persistence for one user-owned collection.

    Every query is filtered by ``user_id``; a row owned by another user is
    indistinguishable from a missing one.
    """

    default_order: Sequence[Any] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get_for_user(self, db: Session, *, id: Any, user_id: str) -> Optional[ModelType]:
        return (
            db.query(self.model)
            .filter(self.model.id == id, self.model.user_id == user_id)
            .first()
        )

    def get_multi_by_user(
        self, db: Session, *, user_id: str, skip: int = 0, limit: Optional[int] = None
    ) -> List[ModelType]:
        query = db.query(self.model).filter(self.model.user_id == user_id)
        if self.default_order:
            query = query.order_by(*self.default_order)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_by_user(self, db: Session, *, user_id: str) -> int:
        return db.query(self.model).filter(self.model.user_id == user_id).count()

    def create(
        self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]], user_id: str, commit: bool = True
    ) -> ModelType:
        obj_in_data = _plain(obj_in if isinstance(obj_in, dict) else obj_in.model_dump())
        db_obj = self.model(**obj_in_data, user_id=user_id)
        db.add(db_obj)
        db.flush()
        if commit:
            db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self, db: Session, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        # ownership and identity are never client-writable
        update_data.pop("id", None)
        update_data.pop("user_id", None)
        update_data = _plain(update_data)
        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update_for_user(
        self, db: Session, *, id: Any, user_id: str, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> Optional[ModelType]:
        db_obj = self.get_for_user(db, id=id, user_id=user_id)
        if not db_obj:
            return None
        return self.update(db, db_obj=db_obj, obj_in=obj_in)

    def delete_for_user(self, db: Session, *, id: Any, user_id: str) -> Optional[ModelType]:
        obj = self.get_for_user(db, id=id, user_id=user_id)
        if not obj:
            return None
        db.delete(obj)
        db.commit()
        return obj


def _plain(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in data.items()}
