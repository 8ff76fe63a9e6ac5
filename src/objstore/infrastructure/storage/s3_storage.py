"""
Infrastructure Adapter: S3 Storage
Implements IStorage on top of an injected object store backend
"""

import logging
from pathlib import Path
from typing import Optional

from objstore.application.ports.backend import IStorageBackend
from objstore.application.ports.storage import IStorage
from objstore.domain.exceptions import (
    BackendWriteError,
    PathConflictError,
    SourceReadError,
)

logger = logging.getLogger(__name__)


def normalize(path: str) -> str:
    """Replace Windows-style separators with forward slashes"""
    return path.replace("\\", "/")


class S3Storage(IStorage):
    """
    Object store adapter for storage
    
    Every operation is a single blocking round trip to the backend. There is
    no locking: append is a read-modify-write, so two callers appending to the
    same path at once race and the last write wins.
    """
    
    def __init__(
        self,
        backend: IStorageBackend,
        log: Optional[logging.Logger] = None
    ):
        """Initialize adapter with an already configured backend"""
        
        self.backend = backend
        self.logger = log or logger
        
        self.logger.info(
            "The storage service has started with the %s adapter (%s backend).",
            type(self).__name__,
            type(backend).__name__
        )
    
    def get(self, path: str) -> str:
        """Return the normalized form of path"""
        return normalize(path)
    
    def exists(self, path: str) -> bool:
        """Check if an object or directory exists in the backend"""
        return self._has(self.get(path))
    
    def mkdir(self, path: str, recursive: bool = True) -> None:
        """Create a directory; fails if anything already lives at path"""
        
        key = self.get(path)
        
        if self._has(key):
            raise PathConflictError(key)
        
        try:
            self.backend.create_dir(key)
        except Exception as e:
            raise BackendWriteError(f"Failed to create directory {key}: {e}", path=key) from e
        
        self.logger.debug("Created directory %s (recursive=%s)", key, recursive)
    
    def put(self, source_file: str, path: str) -> None:
        """Upload a local file, overwriting the object at path"""
        
        key = self.get(path)
        self._write(key, self._read_source(source_file))
    
    def append(self, source_file: str, path: str) -> None:
        """Append a local file's contents to the object at path"""
        
        key = self.get(path)
        
        try:
            contents = self.backend.read(key)
        except Exception as e:
            raise SourceReadError(f"Cannot read stored object {key}: {e}", path=key) from e
        
        contents += self._read_source(source_file)
        self._write(key, contents)
    
    def _has(self, key: str) -> bool:
        try:
            return self.backend.has(key)
        except Exception as e:
            raise SourceReadError(f"Cannot query {key}: {e}", path=key) from e
    
    def _read_source(self, source_file: str) -> bytes:
        """Read a local file in full"""
        
        try:
            return Path(source_file).read_bytes()
        except OSError as e:
            raise SourceReadError(f"Cannot read local file {source_file}: {e}", path=source_file) from e
    
    def _write(self, key: str, data: bytes) -> None:
        try:
            self.backend.write(key, data)
        except Exception as e:
            raise BackendWriteError(f"Failed to write {key}: {e}", path=key) from e
        
        self.logger.debug("Wrote %d bytes to %s", len(data), key)
