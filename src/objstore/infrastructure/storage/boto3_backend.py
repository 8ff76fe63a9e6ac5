"""
Infrastructure Adapter: boto3 Backend
Implements IStorageBackend directly on a boto3 S3 client
"""

import logging

from botocore.exceptions import ClientError

from objstore.application.ports.backend import IStorageBackend

logger = logging.getLogger(__name__)

_MISSING_CODES = {"404", "NoSuchKey", "NotFound", "NoSuchBucket"}


class Boto3Backend(IStorageBackend):
    """AWS S3 backend using the plain boto3 client"""
    
    def __init__(self, client, bucket_name: str):
        """
        Args:
            client: boto3 S3 client (boto3.client("s3", ...))
            bucket_name: Bucket every key is stored in
        """
        
        self.s3_client = client
        self.bucket_name = bucket_name
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(bucket={self.bucket_name!r})"
    
    def has(self, path: str) -> bool:
        """Check for an object at path, or any key under the path/ prefix"""
        
        key = path.lstrip("/")
        
        # Empty key is the bucket root
        if not key:
            try:
                self.s3_client.head_bucket(Bucket=self.bucket_name)
                return True
            except ClientError as e:
                if _error_code(e) in _MISSING_CODES:
                    return False
                raise
        
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=key)
            return True
        except ClientError as e:
            if _error_code(e) not in _MISSING_CODES:
                raise
        
        response = self.s3_client.list_objects_v2(
            Bucket=self.bucket_name,
            Prefix=key.rstrip("/") + "/",
            MaxKeys=1
        )
        return response.get("KeyCount", 0) > 0
    
    def create_dir(self, path: str) -> None:
        """Write an empty path/ marker object"""
        
        key = path.lstrip("/").rstrip("/") + "/"
        logger.debug(f"put_object {self.bucket_name}/{key} (directory marker)")
        self.s3_client.put_object(Bucket=self.bucket_name, Key=key, Body=b"")
    
    def write(self, path: str, data: bytes) -> None:
        key = path.lstrip("/")
        logger.debug(f"put_object {self.bucket_name}/{key} ({len(data)} bytes)")
        self.s3_client.put_object(Bucket=self.bucket_name, Key=key, Body=data)
    
    def read(self, path: str) -> bytes:
        key = path.lstrip("/")
        logger.debug(f"get_object {self.bucket_name}/{key}")
        
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
        except ClientError as e:
            if _error_code(e) in _MISSING_CODES:
                raise FileNotFoundError(f"Object not found: {key}") from e
            raise
        
        return response["Body"].read()


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))
