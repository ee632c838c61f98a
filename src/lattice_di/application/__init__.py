"""
Application layer - Use cases and orchestration.

This layer contains the container, its registry and the components it
delegates to. It depends only on the Domain layer.
"""

from .container import Container
from .fakes import Fake
from .hooks import HookRegistry
from .registry import Registry
from .resolver import DependencyResolver

__all__ = [
    "Container",
    "DependencyResolver",
    "Fake",
    "HookRegistry",
    "Registry",
]
