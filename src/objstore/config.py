"""
Configuration Settings
"""

import json
import os
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from objstore.domain.exceptions import ConfigurationError

# Load environment variables
load_dotenv()


class Credentials(BaseModel):
    """Access key pair"""
    
    model_config = ConfigDict(frozen=True)
    
    key: str = Field(..., description="Access key id")
    secret: str = Field(..., description="Secret access key")


class ClientOptions(BaseModel):
    """Options handed to the S3 client"""
    
    model_config = ConfigDict(frozen=True)
    
    credentials: Optional[Credentials] = Field(None, description="Omit to use the SDK credential chain")
    region: str = Field("us-east-1", description="AWS region")
    version: str = Field("latest", description="S3 API version, 'latest' for the SDK default")
    endpoint: Optional[str] = Field(None, description="Custom endpoint (MinIO, LocalStack)")
    
    @property
    def api_version(self) -> Optional[str]:
        """API version as botocore expects it (None selects the newest)"""
        return None if self.version == "latest" else self.version


class S3StorageOptions(BaseModel):
    """
    Storage options, in the same shape as the JSON options string:
    {"client": {"credentials": {"key", "secret"}, "region", "version"}, "bucket"}
    """
    
    model_config = ConfigDict(frozen=True)
    
    client: ClientOptions = Field(default_factory=ClientOptions)
    bucket: str = Field(..., min_length=1, description="Bucket name")
    driver: Literal["fsspec", "boto3"] = Field("fsspec", description="Backend library")
    
    @classmethod
    def from_json(cls, text: str) -> "S3StorageOptions":
        """Parse the JSON options string"""
        
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid storage options: {e}") from e


class Settings:
    """Application settings"""
    
    # AWS S3 Configuration
    AWS_ACCESS_KEY_ID: str = os.getenv("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY: str = os.getenv("AWS_SECRET_ACCESS_KEY", "")
    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    S3_API_VERSION: str = os.getenv("S3_API_VERSION", "latest")
    S3_BUCKET_NAME: str = os.getenv("S3_BUCKET", "")
    S3_ENDPOINT_URL: Optional[str] = os.getenv("S3_ENDPOINT_URL") or None
    STORAGE_DRIVER: str = os.getenv("STORAGE_DRIVER", "fsspec")
    
    # Full JSON options; takes precedence over the variables above
    STORAGE_OPTIONS: str = os.getenv("STORAGE_OPTIONS", "")
    
    # Local Storage Configuration
    LOCAL_STORAGE_PATH: str = os.getenv("LOCAL_STORAGE_PATH", "data/storage")
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    def s3_options(self) -> Optional[S3StorageOptions]:
        """Build S3 options from the environment, or None when S3 is not configured"""
        
        if self.STORAGE_OPTIONS:
            return S3StorageOptions.from_json(self.STORAGE_OPTIONS)
        
        if not (self.AWS_ACCESS_KEY_ID and self.AWS_SECRET_ACCESS_KEY and self.S3_BUCKET_NAME):
            return None
        
        payload = {
            "client": {
                "credentials": {
                    "key": self.AWS_ACCESS_KEY_ID,
                    "secret": self.AWS_SECRET_ACCESS_KEY
                },
                "region": self.AWS_REGION,
                "version": self.S3_API_VERSION,
                "endpoint": self.S3_ENDPOINT_URL
            },
            "bucket": self.S3_BUCKET_NAME,
            "driver": self.STORAGE_DRIVER
        }
        return S3StorageOptions.from_json(json.dumps(payload))


settings = Settings()
