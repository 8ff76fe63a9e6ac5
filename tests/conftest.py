"""
Pytest configuration and shared fixtures.
"""
import sys
import uuid
from pathlib import Path
from typing import Callable

import fsspec
import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from objstore.infrastructure.storage.fsspec_backend import FsspecBackend
from objstore.infrastructure.storage.s3_storage import S3Storage


@pytest.fixture
def memory_backend():
    """In-memory fsspec backend rooted at a bucket unique to the test."""
    fs = fsspec.filesystem("memory")
    bucket = f"test-bucket-{uuid.uuid4().hex[:8]}"
    
    yield FsspecBackend(fs, root=bucket)
    
    if fs.exists(bucket):
        fs.rm(bucket, recursive=True)


@pytest.fixture
def storage(memory_backend) -> S3Storage:
    """S3Storage adapter over the in-memory backend."""
    return S3Storage(memory_backend)


@pytest.fixture
def make_file(tmp_path) -> Callable[[bytes], str]:
    """Factory writing content to a fresh local file and returning its path."""
    counter = iter(range(1_000_000))
    
    def _make(content: bytes) -> str:
        path = tmp_path / f"source_{next(counter)}.bin"
        path.write_bytes(content)
        return str(path)
    
    return _make


@pytest.fixture
def sample_options() -> dict:
    """Storage options in the JSON options string shape."""
    return {
        "client": {
            "credentials": {"key": "test-key", "secret": "test-secret"},
            "region": "eu-west-1",
            "version": "2006-03-01"
        },
        "bucket": "objstore-test"
    }
