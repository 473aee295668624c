"""Core module containing configuration, constants, and shared utilities."""

from .config import settings
from .constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    TableNames,
)
from .exceptions import (
    BaseApplicationException,
    ConfigurationException,
    DatabaseException,
    FieldNotFoundException,
    InvalidPaginationException,
    NotFoundException,
    RepositoryException,
    StorageUnavailableException,
    ValidationException,
)
from .logging import get_logger

__all__ = [
    "settings",
    "TableNames",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "BaseApplicationException",
    "ConfigurationException",
    "ValidationException",
    "FieldNotFoundException",
    "InvalidPaginationException",
    "NotFoundException",
    "DatabaseException",
    "StorageUnavailableException",
    "RepositoryException",
    "get_logger",
]
