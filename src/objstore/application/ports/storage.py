"""
Port: Storage Interface
Defines the generic storage contract exposed to callers (S3, local, etc.)
"""

from abc import ABC, abstractmethod


class IStorage(ABC):
    """Interface for file storage"""
    
    @abstractmethod
    def get(self, path: str) -> str:
        """
        Translate a path into the form the storage uses
        
        Args:
            path: Caller-supplied path, possibly with backslashes
            
        Returns:
            Normalized path
        """
        pass
    
    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check if an object or directory exists in storage
        
        Args:
            path: Storage path
            
        Returns:
            True if present, False otherwise
        """
        pass
    
    def file_exists(self, path: str) -> bool:
        """Alias of exists()"""
        return self.exists(path)
    
    @abstractmethod
    def mkdir(self, path: str, recursive: bool = True) -> None:
        """
        Create a directory
        
        Args:
            path: Directory path
            recursive: Create missing parents (effect is backend-defined)
            
        Raises:
            PathConflictError: If the path already exists
        """
        pass
    
    @abstractmethod
    def put(self, source_file: str, path: str) -> None:
        """
        Upload a local file, overwriting any existing object
        
        Args:
            source_file: Path to local file
            path: Destination storage path
            
        Raises:
            SourceReadError: If the local file cannot be read
            BackendWriteError: If the backend rejects the write
        """
        pass
    
    @abstractmethod
    def append(self, source_file: str, path: str) -> None:
        """
        Append a local file's contents to an existing object
        
        Args:
            source_file: Path to local file
            path: Storage path of the object to extend
            
        Raises:
            SourceReadError: If the object or the local file cannot be read
            BackendWriteError: If the backend rejects the write
        """
        pass
