"""
Service functions for Lambda handler operations.

This package contains the pattern catalog loader (built-in definitions with
an optional S3 override).
"""

__all__ = ['catalog']
