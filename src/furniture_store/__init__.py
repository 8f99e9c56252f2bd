"""
Furniture Store

Abstract Factory demonstration: stores order chairs and tables from a
factory that only ever produces one furniture family (Hatil or Otobi).
"""

__version__ = "0.1.0"

from .main import main

__all__ = ["main"]
