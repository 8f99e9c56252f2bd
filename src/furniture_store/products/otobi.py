"""
Otobi furniture family
"""

import structlog

from ..variants import FurnitureVariant
from .interface import IChair, ITable

logger = structlog.get_logger(__name__)


class OtobiChair(IChair):
    """Otobi chair"""

    variant = FurnitureVariant.OTOBI

    def deliver(self) -> None:
        print(self.delivery_message())
        logger.debug("Furniture delivered", variant=self.variant.value, kind=self.kind.value)


class OtobiTable(ITable):
    """Otobi table"""

    variant = FurnitureVariant.OTOBI

    def deliver(self) -> None:
        print(self.delivery_message())
        logger.debug("Furniture delivered", variant=self.variant.value, kind=self.kind.value)
