"""
Hatil Furniture Factory
"""

from ..products import IChair, ITable, HatilChair, HatilTable
from ..variants import FurnitureVariant
from .interface import IFurnitureFactory


class HatilFactory(IFurnitureFactory):
    """Builds Hatil chairs and tables"""

    variant = FurnitureVariant.HATIL

    def create_chair(self) -> IChair:
        return HatilChair()

    def create_table(self) -> ITable:
        return HatilTable()
