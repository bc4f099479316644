from typing import List, Optional
from fastapi import HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.cache import TTLCache
from app.core.constants import CacheViewEnum, DEFAULT_CLASS_COLOR, MutationEnum, WEEKDAY_NAMES
from app.crud.class_entry import class_entry as crud_class_entry
from app.schemas.class_entry import ClassEntry, ClassEntryCreate, ClassEntryUpdate
from app.services.cache_service import cache_service
from app.utils.cache_invalidation import CacheInvalidator

WEEKDAY_PREFIXES = [name[:3].lower() for name in WEEKDAY_NAMES]


class ClassScheduleService:

    def list_classes(self, db: Session, cache: TTLCache, user_id: str, request: Optional[Request] = None) -> List[ClassEntry]:
        return cache_service.get_or_compute(
            cache, CacheViewEnum.CLASSES, user_id,
            lambda: [ClassEntry.model_validate(row) for row in crud_class_entry.get_multi_by_user(db, user_id=user_id)],
            request=request,
        )

    def create_class(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, class_in: ClassEntryCreate
    ) -> ClassEntry:
        prefix = class_in.day.strip()[:3].lower()
        day_index = WEEKDAY_PREFIXES.index(prefix) if prefix in WEEKDAY_PREFIXES else 0

        class_data = {
            "subject": class_in.subject.strip(),
            "instructor": (class_in.instructor or "").strip(),
            "day": class_in.day,
            "day_index": day_index,
            "start_time": class_in.start_time,
            "end_time": class_in.end_time,
            "color": class_in.color or DEFAULT_CLASS_COLOR,
        }
        new_class = crud_class_entry.create(db, obj_in=class_data, user_id=user_id)
        invalidator.invalidate(MutationEnum.CLASS_CHANGED, user_id)
        return ClassEntry.model_validate(new_class)

    def update_class(
        self, db: Session, invalidator: CacheInvalidator, user_id: str, class_id: int, class_in: ClassEntryUpdate
    ) -> ClassEntry:
        update_data = class_in.model_dump(exclude_unset=True)
        if update_data.get("day"):
            if update_data["day"] not in WEEKDAY_NAMES:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid day provided")
            update_data["day_index"] = WEEKDAY_NAMES.index(update_data["day"])

        updated = crud_class_entry.update_for_user(db, id=class_id, user_id=user_id, obj_in=update_data)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found or unauthorized")
        invalidator.invalidate(MutationEnum.CLASS_CHANGED, user_id)
        return ClassEntry.model_validate(updated)

    def delete_class(self, db: Session, invalidator: CacheInvalidator, user_id: str, class_id: int) -> None:
        deleted = crud_class_entry.delete_for_user(db, id=class_id, user_id=user_id)
        if not deleted:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found or unauthorized")
        invalidator.invalidate(MutationEnum.CLASS_CHANGED, user_id)


class_schedule_service = ClassScheduleService()
