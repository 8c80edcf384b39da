# Base data provider
from .base_data_provider import BaseDataProvider

__all__ = [
    "BaseDataProvider",
]
