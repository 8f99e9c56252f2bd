"""
Furniture Product Interfaces

Defines the contract every chair and table implementation satisfies.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from ..variants import FurnitureVariant, ProductKind


class IFurniture(ABC):
    """Interface shared by every furniture product"""

    kind: ClassVar[ProductKind]
    variant: ClassVar[FurnitureVariant]

    @abstractmethod
    def deliver(self) -> None:
        """
        Deliver this piece of furniture to the customer.

        Writes one console line naming the variant and kind. Never fails.
        """
        pass

    def delivery_message(self) -> str:
        """Console line announcing delivery, such as: Hatil chair delivered"""
        return f"{self.variant.display_name} {self.kind.value} delivered"


class IChair(IFurniture):
    """Interface for chairs"""

    kind = ProductKind.CHAIR


class ITable(IFurniture):
    """Interface for tables"""

    kind = ProductKind.TABLE
