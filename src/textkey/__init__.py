# src/textkey/__init__.py
"""
textkey: claves textuales inmutables con forma prestada o propia.
"""

from __future__ import annotations

# Core
from .core.exceptions import TextKeyError, UnsupportedKeySource
from .core.value_objects import EMPTY, Key, OwnedText, StaticText

__all__ = [
    "Key",
    "StaticText",
    "OwnedText",
    "EMPTY",
    "TextKeyError",
    "UnsupportedKeySource",
]

__version__ = "0.1.0"
