"""
Port: Storage Backend
Capabilities the storage adapter needs from a concrete object store
"""

from abc import ABC, abstractmethod


class IStorageBackend(ABC):
    """Interface for an object store backend; paths are already normalized"""
    
    @abstractmethod
    def has(self, path: str) -> bool:
        """Return True if an object or prefix exists at path"""
        pass
    
    @abstractmethod
    def create_dir(self, path: str) -> None:
        """Create a directory (or prefix) at path"""
        pass
    
    @abstractmethod
    def write(self, path: str, data: bytes) -> None:
        """Write data to path, replacing any existing object"""
        pass
    
    @abstractmethod
    def read(self, path: str) -> bytes:
        """
        Read the full object at path
        
        Raises:
            FileNotFoundError: If no object exists at path
        """
        pass
