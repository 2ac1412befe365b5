"""Tests for the catalog module."""

from datetime import date

import pytest
import yaml
from pydantic import ValidationError

from groovyfox.catalog import (
    Catalog,
    DateRange,
    FestivalLocation,
    ShoeModel,
    ShoeType,
    catalog_from_dict,
    default_catalog,
    load_catalog,
)
from groovyfox.errors import CatalogError


def model(model_id, **overrides):
    data = dict(
        id=model_id,
        name=f"Fox {model_id}",
        colour="red",
        type=ShoeType.FLATS,
        price=10,
        image_url=f"http://img/{model_id}.jpg",
    )
    data.update(overrides)
    return ShoeModel(**data)


def festival(festival_id, model_ids=(), **overrides):
    data = dict(
        id=festival_id,
        city="Sofia",
        name=f"Fest {festival_id}",
        period=DateRange(start_date=date(2019, 6, 1), end_date=date(2019, 6, 3)),
        image_url=f"http://img/f{festival_id}.jpg",
        model_ids=model_ids,
    )
    data.update(overrides)
    return FestivalLocation(**data)


def test_default_catalog_contents():
    catalog = default_catalog()

    assert len(catalog) == 8
    assert [m.id for m in catalog.models] == [1, 2, 3, 4, 5, 6, 7, 8]
    assert [f.city for f in catalog.festivals] == ["Athens", "Belgrade", "Sofia"]
    for fest in catalog.festivals:
        assert fest.period.start_date <= fest.period.end_date


def test_default_catalog_cross_references_agree():
    """A model lists a festival exactly when the festival lists the model."""
    catalog = default_catalog()

    for shoe in catalog.models:
        assert [f.id for f in catalog.festivals_for_model(shoe.id)] == list(shoe.festival_ids)


def test_lookups():
    catalog = Catalog([model(1), model(2)], [festival(1, model_ids=(2,))])

    assert catalog.get_model(2).name == "Fox 2"
    assert catalog.get_model(3) is None
    assert catalog.get_festival(1).name == "Fest 1"
    assert catalog.get_festival(5) is None
    assert catalog.festivals_for_model(1) == []
    assert [m.id for m in catalog.models_for_festival(1)] == [2]
    assert catalog.models_for_festival(9) == []


def test_shoe_types():
    assert default_catalog().shoe_types == [
        ShoeType.HEELS,
        ShoeType.OXFORDS,
        ShoeType.TRAINERS,
        ShoeType.FLATS,
    ]


def test_duplicate_model_id():
    with pytest.raises(CatalogError) as exc_info:
        Catalog([model(1), model(1)], [])
    assert "Duplicate shoe model id" in str(exc_info.value)


def test_duplicate_festival_id():
    with pytest.raises(CatalogError):
        Catalog([], [festival(1), festival(1)])


def test_festival_with_unknown_model():
    with pytest.raises(CatalogError) as exc_info:
        Catalog([model(1)], [festival(1, model_ids=(1, 2))])
    assert "unknown model 2" in str(exc_info.value)


def test_model_with_unknown_festival():
    with pytest.raises(CatalogError):
        Catalog([model(1, festival_ids=(4,))], [])


def test_models_are_immutable():
    shoe = model(1)
    with pytest.raises(ValidationError):
        shoe.price = 1


def test_model_validation():
    with pytest.raises(ValidationError):
        model(0)
    with pytest.raises(ValidationError):
        model(1, type="sandals")
    assert model(1, colour=" Red ").colour == "red"


def test_date_range_order():
    with pytest.raises(ValidationError):
        DateRange(start_date=date(2019, 6, 3), end_date=date(2019, 6, 1))

    single_day = DateRange(start_date=date(2019, 6, 1), end_date=date(2019, 6, 1))
    assert single_day.start_date == single_day.end_date


def test_catalog_from_dict_invalid_entry():
    with pytest.raises(CatalogError):
        catalog_from_dict({"models": [{"id": 1}]})


def test_load_catalog(tmp_path):
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text(yaml.dump({
        "models": [{
            "id": 1,
            "name": "Test Foxes",
            "colour": "green",
            "type": "trainers",
            "price": 30,
            "image_url": "http://img/1.jpg",
            "festival_ids": [1],
        }],
        "festivals": [{
            "id": 1,
            "city": "Plovdiv",
            "name": "Plovdiv Jazz",
            "period": {"start_date": "2020-05-01", "end_date": "2020-05-02"},
            "image_url": "http://img/p.jpg",
            "model_ids": [1],
        }],
    }))

    catalog = load_catalog(str(catalog_file))

    assert catalog.get_model(1).type == ShoeType.TRAINERS
    assert catalog.get_festival(1).period.end_date == date(2020, 5, 2)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(str(tmp_path / "nope.yaml"))


def test_load_catalog_not_a_mapping(tmp_path):
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text("- just\n- a list\n")

    with pytest.raises(CatalogError):
        load_catalog(str(catalog_file))
