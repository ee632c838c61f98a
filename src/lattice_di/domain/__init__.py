"""
Domain layer - Core models, contracts and errors.

This layer contains the type key rules, constructor metadata and the
exception hierarchy. It has no dependencies on other layers.
"""

from .exceptions import DecorationError, DIException, InvalidTypeError, TypeNotFoundError
from .interfaces import IContainer
from .metadata import get_metadata, inject, injectable, set_metadata
from .models import ConstructorMetadata, TypeKey, is_type_key, validate_type_key

__all__ = [
    # Exceptions
    "DIException",
    "InvalidTypeError",
    "TypeNotFoundError",
    "DecorationError",
    # Interfaces
    "IContainer",
    # Models
    "ConstructorMetadata",
    "TypeKey",
    "is_type_key",
    "validate_type_key",
    # Metadata
    "get_metadata",
    "set_metadata",
    "inject",
    "injectable",
]
