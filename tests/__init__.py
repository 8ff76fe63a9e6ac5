"""
Test suite for objstore.

Architecture: Hexagonal (Ports & Adapters)
Testing Strategy:
- Unit tests: S3Storage adapter over an in-memory fsspec backend
- Adapter tests: fsspec and boto3 backends with mocked clients
- Integration tests: real S3 compatible endpoint (marked integration)
"""
