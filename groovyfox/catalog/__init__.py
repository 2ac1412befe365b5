"""Catalog module - Shoe and festival reference data."""

from .catalog import Catalog, catalog_from_dict, load_catalog
from .data import default_catalog
from .models import DateRange, FestivalLocation, ShoeModel, ShoeType

__all__ = [
    "Catalog",
    "catalog_from_dict",
    "load_catalog",
    "default_catalog",
    "DateRange",
    "FestivalLocation",
    "ShoeModel",
    "ShoeType",
]
