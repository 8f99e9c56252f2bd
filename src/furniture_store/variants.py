"""
Furniture variant and product kind tags
"""

from enum import Enum


class FurnitureVariant(str, Enum):
    """Named family of mutually compatible furniture"""

    HATIL = "hatil"
    OTOBI = "otobi"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class ProductKind(str, Enum):
    """Category of furniture within a family"""

    CHAIR = "chair"
    TABLE = "table"
