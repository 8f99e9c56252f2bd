"""
Furniture Store Base

Order workflow shared by every store. Stores differ only in the factory they select.
"""

from abc import ABC, abstractmethod
import structlog

from ..factories.interface import IFurnitureFactory
from ..products.interface import IChair, ITable

logger = structlog.get_logger(__name__)


class FurnitureStore(ABC):
    """
    Store that orders a chair and a table from a single furniture factory.

    Only talks to the factory and product interfaces, so every piece of an
    order comes from whichever family select_factory() returns.
    """

    def order_furniture(self) -> None:
        """Select a factory, then build and deliver a chair followed by a table"""
        furniture_factory = self.select_factory()
        logger.info("Ordering furniture", store=type(self).__name__,
                    factory=type(furniture_factory).__name__)

        chair: IChair = furniture_factory.create_chair()
        chair.deliver()

        table: ITable = furniture_factory.create_table()
        table.deliver()

        logger.info("Furniture order complete", store=type(self).__name__)

    @abstractmethod
    def select_factory(self) -> IFurnitureFactory:
        """
        Choose the factory this store orders from.

        Returns:
            Factory whose products make up every order of this store
        """
        pass
