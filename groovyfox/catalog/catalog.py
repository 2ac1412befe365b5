"""In-memory catalog of shoe models and festival locations."""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from ..errors import CatalogError
from .models import FestivalLocation, ShoeModel, ShoeType

logger = logging.getLogger(__name__)


class Catalog:
    """
    Immutable reference tables for shoe models and festivals.

    Both tables keep the order they were given in; every lookup that returns
    several items returns them in that order. Cross references are checked on
    construction so that any id the router puts into a postback is known to
    exist.
    """

    def __init__(
        self,
        models: Iterable[ShoeModel],
        festivals: Iterable[FestivalLocation],
    ):
        self._models = tuple(models)
        self._festivals = tuple(festivals)
        self._models_by_id = self._index(self._models, "shoe model")
        self._festivals_by_id = self._index(self._festivals, "festival")
        self._check_references()

    @staticmethod
    def _index(items, kind: str) -> dict:
        index = {}
        for item in items:
            if item.id in index:
                raise CatalogError(f"Duplicate {kind} id: {item.id}")
            index[item.id] = item
        return index

    def _check_references(self) -> None:
        for festival in self._festivals:
            for model_id in festival.model_ids:
                if model_id not in self._models_by_id:
                    raise CatalogError(
                        f"Festival {festival.id} references unknown model {model_id}"
                    )
        for model in self._models:
            for festival_id in model.festival_ids:
                if festival_id not in self._festivals_by_id:
                    raise CatalogError(
                        f"Model {model.id} references unknown festival {festival_id}"
                    )

    @property
    def models(self) -> tuple[ShoeModel, ...]:
        return self._models

    @property
    def festivals(self) -> tuple[FestivalLocation, ...]:
        return self._festivals

    @property
    def shoe_types(self) -> List[ShoeType]:
        return list(ShoeType)

    def get_model(self, model_id: int) -> Optional[ShoeModel]:
        return self._models_by_id.get(model_id)

    def get_festival(self, festival_id: int) -> Optional[FestivalLocation]:
        return self._festivals_by_id.get(festival_id)

    def festivals_for_model(self, model_id: int) -> List[FestivalLocation]:
        """Festivals whose stock includes the given model."""
        return [f for f in self._festivals if model_id in f.model_ids]

    def models_for_festival(self, festival_id: int) -> List[ShoeModel]:
        """Models brought to the given festival, empty if it is unknown."""
        festival = self.get_festival(festival_id)
        if festival is None:
            return []
        return [m for m in self._models if m.id in festival.model_ids]

    def __len__(self) -> int:
        return len(self._models)


def catalog_from_dict(data: dict[str, Any]) -> Catalog:
    """
    Build a Catalog from plain data (as parsed from YAML or JSON).

    Args:
        data: Mapping with "models" and "festivals" lists

    Returns:
        Validated Catalog

    Raises:
        CatalogError: If an entry fails validation or references are broken
    """
    try:
        models = [ShoeModel(**item) for item in data.get("models", [])]
        festivals = [FestivalLocation(**item) for item in data.get("festivals", [])]
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog entry: {e}") from e
    return Catalog(models, festivals)


def load_catalog(path: str) -> Catalog:
    """
    Load a catalog from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CatalogError: If the content is not a valid catalog
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(catalog_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog file {path} must contain a mapping")

    catalog = catalog_from_dict(raw)
    logger.info(
        f"Loaded catalog from {path}: {len(catalog.models)} models, "
        f"{len(catalog.festivals)} festivals"
    )
    return catalog
