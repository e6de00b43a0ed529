"""Utility modules for filepaths."""

from .console import ConsoleManager, StatusType
from .extensions import (
    base_name,
    base_name_without_ext,
    change_extension,
    change_last_extension,
    has_extension,
    has_extensions,
)

__all__ = [
    "ConsoleManager",
    "StatusType",
    "base_name",
    "base_name_without_ext",
    "change_extension",
    "change_last_extension",
    "has_extension",
    "has_extensions",
]
