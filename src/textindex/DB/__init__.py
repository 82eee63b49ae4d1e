from .api import RecordStore, make_store
from .memory_store import MemoryStore

__all__ = ["RecordStore", "MemoryStore", "make_store"]
