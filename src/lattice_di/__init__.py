"""
lattice-di: Forkable dependency injection container with explicit constructor metadata.

Public API exports for the lattice-di package.
"""

# Application exports
from lattice_di.application.container import Container
from lattice_di.application.fakes import Fake

# Domain exports
from lattice_di.domain.exceptions import (
    DecorationError,
    DIException,
    InvalidTypeError,
    TypeNotFoundError,
)
from lattice_di.domain.metadata import get_metadata, inject, injectable
from lattice_di.domain.models import ConstructorMetadata, TypeKey

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "Fake",
    # Metadata
    "ConstructorMetadata",
    "TypeKey",
    "get_metadata",
    "inject",
    "injectable",
    # Exceptions
    "DIException",
    "InvalidTypeError",
    "TypeNotFoundError",
    "DecorationError",
]
