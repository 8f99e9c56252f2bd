"""
Hatil furniture family
"""

import structlog

from ..variants import FurnitureVariant
from .interface import IChair, ITable

logger = structlog.get_logger(__name__)


class HatilChair(IChair):
    """Hatil chair"""

    variant = FurnitureVariant.HATIL

    def deliver(self) -> None:
        print(self.delivery_message())
        logger.debug("Furniture delivered", variant=self.variant.value, kind=self.kind.value)


class HatilTable(ITable):
    """Hatil table"""

    variant = FurnitureVariant.HATIL

    def deliver(self) -> None:
        print(self.delivery_message())
        logger.debug("Furniture delivered", variant=self.variant.value, kind=self.kind.value)
