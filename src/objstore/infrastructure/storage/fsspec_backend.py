"""
Infrastructure Adapter: fsspec Backend
Implements IStorageBackend for any fsspec filesystem (s3fs, local, memory)
"""

import logging

from fsspec import AbstractFileSystem

from objstore.application.ports.backend import IStorageBackend

logger = logging.getLogger(__name__)


class FsspecBackend(IStorageBackend):
    """Backend delegating to an fsspec filesystem rooted at a bucket or directory"""
    
    def __init__(self, fs: AbstractFileSystem, root: str = ""):
        """
        Args:
            fs: Initialized filesystem (e.g. s3fs.S3FileSystem)
            root: Bucket name or base directory every path is joined under
        """
        
        self.fs = fs
        self.root = root.rstrip("/")
    
    def __repr__(self) -> str:
        protocol = self.fs.protocol
        if isinstance(protocol, (tuple, list)):
            protocol = protocol[0]
        return f"{type(self).__name__}(protocol={protocol!r}, root={self.root!r})"
    
    def _full_path(self, path: str) -> str:
        path = path.lstrip("/")
        if not self.root:
            return path
        return f"{self.root}/{path}" if path else self.root
    
    def has(self, path: str) -> bool:
        return self.fs.exists(self._full_path(path))
    
    def create_dir(self, path: str) -> None:
        full_path = self._full_path(path)
        logger.debug(f"makedirs {full_path}")
        
        self.fs.makedirs(full_path, exist_ok=True)
        
        # Object stores only list a prefix once some key lives under it
        if not self.fs.exists(full_path):
            self.fs.pipe_file(full_path.rstrip("/") + "/", b"")
    
    def write(self, path: str, data: bytes) -> None:
        full_path = self._full_path(path)
        logger.debug(f"pipe_file {full_path} ({len(data)} bytes)")
        self.fs.pipe_file(full_path, data)
    
    def read(self, path: str) -> bytes:
        full_path = self._full_path(path)
        logger.debug(f"cat_file {full_path}")
        return self.fs.cat_file(full_path)
