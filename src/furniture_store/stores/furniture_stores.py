"""
Concrete furniture stores
"""

from typing import Optional, Union

from ..config import Settings, get_settings
from ..factories import IFurnitureFactory, HatilFactory, OtobiFactory, FurnitureFactoryProvider
from ..variants import FurnitureVariant
from .base import FurnitureStore


class HatilFurnitureStore(FurnitureStore):
    """Store selling Hatil furniture"""

    def select_factory(self) -> IFurnitureFactory:
        return HatilFactory()


class OtobiFurnitureStore(FurnitureStore):
    """Store selling Otobi furniture"""

    def select_factory(self) -> IFurnitureFactory:
        return OtobiFactory()


class ConfiguredFurnitureStore(FurnitureStore):
    """
    Store whose furniture family is chosen at runtime.

    Uses the explicit variant when given, otherwise FURNITURE_VARIANT from settings.
    """

    def __init__(
        self,
        variant: Optional[Union[FurnitureVariant, str]] = None,
        settings: Optional[Settings] = None
    ):
        self.variant = variant
        self.settings = settings

    def select_factory(self) -> IFurnitureFactory:
        if self.variant is not None:
            return FurnitureFactoryProvider.create(self.variant)
        return FurnitureFactoryProvider.create_from_settings(self.settings or get_settings())
