"""
Enum types shared by the loader, the API and the page shell.
"""
from enum import Enum


class LoadStatus(str, Enum):
    """
    Observable states of a catalog load.
    A load starts PENDING and settles exactly once.
    """
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ColumnRole(str, Enum):
    """Semantic roles read from each data row."""
    PROVIDER_CODE = "provider_code"
    INSTITUTION_NAME = "institution_name"
    COURSE_CODE = "course_code"
    COURSE_NAME = "course_name"
