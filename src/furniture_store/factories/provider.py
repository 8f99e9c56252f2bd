"""
Furniture Factory Provider

Selects the furniture factory for a variant or for the configured settings.
"""

from typing import Dict, Type, Union
import structlog

from ..config import Settings
from ..variants import FurnitureVariant
from .interface import IFurnitureFactory, UnsupportedVariantError
from .hatil_factory import HatilFactory
from .otobi_factory import OtobiFactory

logger = structlog.get_logger(__name__)


class FurnitureFactoryProvider:
    """Factory for creating furniture factories"""

    _factories: Dict[FurnitureVariant, Type[IFurnitureFactory]] = {
        FurnitureVariant.HATIL: HatilFactory,
        FurnitureVariant.OTOBI: OtobiFactory,
    }

    @staticmethod
    def create(variant: Union[FurnitureVariant, str]) -> IFurnitureFactory:
        """
        Create furniture factory for a variant.

        Args:
            variant: Variant tag or its name (case-insensitive)

        Returns:
            New factory producing only that variant's furniture

        Raises:
            UnsupportedVariantError: If no factory exists for the variant
        """
        if not isinstance(variant, FurnitureVariant):
            try:
                variant = FurnitureVariant(str(variant).strip().lower())
            except ValueError:
                raise UnsupportedVariantError(f"Unsupported furniture variant: {variant}") from None

        logger.info("Creating furniture factory", variant=variant.value)
        return FurnitureFactoryProvider._factories[variant]()

    @staticmethod
    def create_from_settings(settings: Settings) -> IFurnitureFactory:
        """
        Create furniture factory based on configuration.

        Raises:
            UnsupportedVariantError: If settings name no furniture variant
        """
        if settings.furniture_variant is None:
            raise UnsupportedVariantError("No furniture variant configured (set FURNITURE_VARIANT)")
        return FurnitureFactoryProvider.create(settings.furniture_variant)

    @staticmethod
    def get_available_variants() -> list[str]:
        """Get list of available furniture variants"""
        return [variant.value for variant in FurnitureFactoryProvider._factories]
