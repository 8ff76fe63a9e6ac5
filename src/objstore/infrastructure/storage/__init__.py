"""
Infrastructure Storage

Adapters binding the IStorage contract to concrete object stores.
"""

from .s3_storage import S3Storage, normalize
from .fsspec_backend import FsspecBackend
from .boto3_backend import Boto3Backend

__all__ = [
    "S3Storage",
    "normalize",
    "FsspecBackend",
    "Boto3Backend",
]
