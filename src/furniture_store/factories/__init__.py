"""
Furniture factories

One factory per furniture family, plus a provider that selects among them.
"""

from .interface import IFurnitureFactory, UnsupportedVariantError
from .hatil_factory import HatilFactory
from .otobi_factory import OtobiFactory
from .provider import FurnitureFactoryProvider

__all__ = [
    "IFurnitureFactory",
    "UnsupportedVariantError",
    "HatilFactory",
    "OtobiFactory",
    "FurnitureFactoryProvider",
]
