from app.crud.base import CRUDBase
from app.models.class_entry import ClassEntry
from app.schemas.class_entry import ClassEntryCreate, ClassEntryUpdate

class CRUDClassEntry(CRUDBase[ClassEntry, ClassEntryCreate, ClassEntryUpdate]):
    default_order = (ClassEntry.day_index.asc(), ClassEntry.start_time.asc(), ClassEntry.created_at.desc())

class_entry = CRUDClassEntry(ClassEntry)
