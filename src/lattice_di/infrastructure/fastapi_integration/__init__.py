"""
FastAPI integration module.

Provides helpers for exposing lattice-di containers to FastAPI endpoints.
"""

from .integration import (
    create_app_dependency,
    create_fastapi_dependency,
    create_walk_dependency,
    install_container,
    provide,
)

__all__ = [
    "create_app_dependency",
    "create_fastapi_dependency",
    "create_walk_dependency",
    "install_container",
    "provide",
]
