"""
objstore: generic storage interface over S3 compatible object stores
"""

__version__ = "1.0.0"
