"""
Furniture Store

Main entry point: runs the furniture stores and prints each delivery.
"""

import argparse
import logging
import sys
from typing import List, Optional
import structlog

from .config import get_settings, load_dotenv_if_exists
from .factories import FurnitureFactoryProvider
from .stores import FurnitureStore, HatilFurnitureStore, OtobiFurnitureStore, ConfiguredFurnitureStore


# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


def configure_logging(log_level: str) -> None:
    """Route structlog through stdlib logging on stderr at the given level"""
    level = getattr(logging, log_level.upper())
    # Deliveries go to stdout, logs stay on stderr
    logging.basicConfig(stream=sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(level)


def build_stores(variant: Optional[str]) -> List[FurnitureStore]:
    """Stores to run: the configured one for a variant, otherwise every store in turn"""
    if variant:
        return [ConfiguredFurnitureStore(variant)]
    return [HatilFurnitureStore(), OtobiFurnitureStore()]


def main(argv: Optional[List[str]] = None) -> Optional[int]:
    """Main entry point with command line argument parsing"""
    load_dotenv_if_exists()

    parser = argparse.ArgumentParser(description="Furniture Store (Abstract Factory demo)")
    parser.add_argument(
        "--variant",
        type=str.lower,
        choices=FurnitureFactoryProvider.get_available_variants(),
        help="Order from a single furniture family (default: FURNITURE_VARIANT, else every store)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: LOG_LEVEL setting, info)",
    )
    parser.add_argument(
        "--list-variants", action="store_true", help="List available furniture variants and exit"
    )

    args = parser.parse_args(argv)

    if args.list_variants:
        for variant in FurnitureFactoryProvider.get_available_variants():
            print(variant)
        return 0

    try:
        settings = get_settings()
    except ValueError as e:
        configure_logging(args.log_level or "info")
        if args.variant is None:
            logger.error("Failed to load settings", error=str(e))
            return 1
        # An explicit --variant does not need the environment's variant
        logger.warning("Ignoring invalid settings", variant=args.variant, error=str(e))
        settings = None

    if settings is not None:
        configure_logging(args.log_level or settings.effective_log_level)

    variant = args.variant
    if variant is None and settings.furniture_variant is not None:
        variant = settings.furniture_variant.value

    for store in build_stores(variant):
        store.order_furniture()

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
