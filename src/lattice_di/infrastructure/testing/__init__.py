"""
Testing utilities module.

Provides helpers for testing applications built on lattice-di.
"""

from .utilities import FakeScope, create_fake_container

__all__ = [
    "create_fake_container",
    "FakeScope",
]
