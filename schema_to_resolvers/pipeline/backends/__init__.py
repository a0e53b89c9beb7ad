"""
Emission backends.

Contains the template-driven renderers for the emission model.
"""

from __future__ import annotations

from .base import EmissionBackend
from .python_backend import PythonBackend

__all__ = [
    "EmissionBackend",
    "PythonBackend",
]
