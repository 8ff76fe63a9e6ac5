"""
Dependencies: Storage Factory
Builds storage adapters from configuration
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import boto3
import fsspec
import s3fs

from objstore.application.ports.backend import IStorageBackend
from objstore.application.ports.storage import IStorage
from objstore.config import S3StorageOptions, settings
from objstore.infrastructure.storage.boto3_backend import Boto3Backend
from objstore.infrastructure.storage.fsspec_backend import FsspecBackend
from objstore.infrastructure.storage.s3_storage import S3Storage

logger = logging.getLogger(__name__)


def build_backend(options: S3StorageOptions) -> IStorageBackend:
    """Create the backend selected by options.driver"""
    
    client = options.client
    
    if options.driver == "boto3":
        client_kwargs = {"region_name": client.region}
        
        if client.api_version:
            client_kwargs["api_version"] = client.api_version
        
        if client.credentials:
            client_kwargs["aws_access_key_id"] = client.credentials.key
            client_kwargs["aws_secret_access_key"] = client.credentials.secret
        
        # Add endpoint URL for MinIO / LocalStack support
        if client.endpoint:
            client_kwargs["endpoint_url"] = client.endpoint
        
        return Boto3Backend(boto3.client("s3", **client_kwargs), options.bucket)
    
    fs_kwargs = {"client_kwargs": {"region_name": client.region}}
    
    if client.api_version:
        fs_kwargs["client_kwargs"]["api_version"] = client.api_version
    
    if client.credentials:
        fs_kwargs["key"] = client.credentials.key
        fs_kwargs["secret"] = client.credentials.secret
    
    if client.endpoint:
        fs_kwargs["endpoint_url"] = client.endpoint
    
    return FsspecBackend(s3fs.S3FileSystem(**fs_kwargs), root=options.bucket)


def create_storage(
    options: Union[S3StorageOptions, str],
    log: Optional[logging.Logger] = None
) -> IStorage:
    """
    Create an S3 storage adapter
    
    Args:
        options: Parsed options or the JSON options string
        log: Logger handed to the adapter
    
    Returns:
        Ready to use S3Storage
    """
    
    if isinstance(options, str):
        options = S3StorageOptions.from_json(options)
    
    return S3Storage(build_backend(options), log=log)


def create_local_storage(
    base_path: str,
    log: Optional[logging.Logger] = None
) -> IStorage:
    """Create a storage adapter over a local directory"""
    
    root = Path(base_path).absolute()
    root.mkdir(parents=True, exist_ok=True)
    
    fs = fsspec.filesystem("file", auto_mkdir=True)
    return S3Storage(FsspecBackend(fs, root=root.as_posix()), log=log)


@lru_cache()
def get_storage() -> IStorage:
    """Get storage implementation (S3 or Local fallback)"""
    
    # Try S3 if configured
    try:
        options = settings.s3_options()
        if options is not None:
            return create_storage(options)
    except Exception as e:
        logger.warning(f"S3 initialization failed, using local storage: {e}")
    
    # Fallback to local storage
    return create_local_storage(settings.LOCAL_STORAGE_PATH)
