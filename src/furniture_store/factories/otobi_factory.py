"""
Otobi Furniture Factory
"""

from ..products import IChair, ITable, OtobiChair, OtobiTable
from ..variants import FurnitureVariant
from .interface import IFurnitureFactory


class OtobiFactory(IFurnitureFactory):
    """Builds Otobi chairs and tables"""

    variant = FurnitureVariant.OTOBI

    def create_chair(self) -> IChair:
        return OtobiChair()

    def create_table(self) -> ITable:
        return OtobiTable()
