"""Furniture products: interfaces and concrete families"""

from .interface import IFurniture, IChair, ITable
from .hatil import HatilChair, HatilTable
from .otobi import OtobiChair, OtobiTable

__all__ = [
    "IFurniture",
    "IChair",
    "ITable",
    "HatilChair",
    "HatilTable",
    "OtobiChair",
    "OtobiTable",
]
