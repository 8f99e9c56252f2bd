"""Furniture stores: the clients of the furniture factories"""

from .base import FurnitureStore
from .furniture_stores import HatilFurnitureStore, OtobiFurnitureStore, ConfiguredFurnitureStore

__all__ = [
    "FurnitureStore",
    "HatilFurnitureStore",
    "OtobiFurnitureStore",
    "ConfiguredFurnitureStore",
]
