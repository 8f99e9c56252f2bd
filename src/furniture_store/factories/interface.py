"""
Furniture Factory Interface

Defines contract for factories that build one furniture family.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict

from ..products import IChair, ITable
from ..variants import FurnitureVariant


class IFurnitureFactory(ABC):
    """Interface for furniture factories"""

    variant: ClassVar[FurnitureVariant]

    @abstractmethod
    def create_chair(self) -> IChair:
        """
        Build a new chair.

        Returns:
            Freshly constructed chair of this factory's variant
        """
        pass

    @abstractmethod
    def create_table(self) -> ITable:
        """
        Build a new table.

        Returns:
            Freshly constructed table of this factory's variant
        """
        pass

    def get_factory_info(self) -> Dict[str, Any]:
        """
        Get information about the factory.

        Returns:
            Factory metadata (type, variant, product kinds)
        """
        return {
            "type": type(self).__name__,
            "variant": self.variant.value,
            "products": ["chair", "table"],
        }


class UnsupportedVariantError(ValueError):
    """Raised when no factory exists for a requested variant"""
    pass
