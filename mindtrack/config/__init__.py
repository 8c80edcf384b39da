"""
Configuration module
"""
from .constants import *
from .database import *
from .settings_manager import settings

__all__ = [
    "settings",
]
