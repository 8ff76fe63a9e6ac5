from .storage import IStorage
from .backend import IStorageBackend

__all__ = ["IStorage", "IStorageBackend"]
