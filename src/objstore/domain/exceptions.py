"""
Domain: Storage Exceptions
Errors surfaced by the storage adapter to its callers
"""

from typing import Optional


class StorageError(Exception):
    """Base class for all storage adapter errors"""
    
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class PathConflictError(StorageError):
    """Raised by mkdir when the target path already exists"""
    
    def __init__(self, path: str):
        super().__init__(f"Path already exists: {path}", path=path)


class SourceReadError(StorageError):
    """Raised when a local file or a stored object cannot be read"""
    pass


class BackendWriteError(StorageError):
    """Raised when the backend rejects a write; the backend error is chained as __cause__"""
    pass


class ConfigurationError(StorageError):
    """Raised when storage options are missing or invalid"""
    pass
