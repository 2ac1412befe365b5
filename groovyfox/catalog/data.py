"""Built-in reference data for the Groovy Fox demo."""

from datetime import date

from .catalog import Catalog
from .models import DateRange, FestivalLocation, ShoeModel, ShoeType

ATHENS = 1
BELGRADE = 2
SOFIA = 3

_ALL_FESTIVALS = (ATHENS, BELGRADE, SOFIA)

SHOE_MODELS = (
    ShoeModel(
        id=1,
        name="Classy Foxes",
        colour="white",
        type=ShoeType.HEELS,
        price=112,
        image_url="https://groovyfox.bg/wp-content/uploads/2018/10/Bride1.jpg",
        festival_ids=_ALL_FESTIVALS,
    ),
    ShoeModel(
        id=2,
        name="Furry Foxes",
        colour="pink",
        type=ShoeType.HEELS,
        price=114,
        image_url="https://groovyfox.bg/wp-content/uploads/2018/04/pink1-1.jpg",
        festival_ids=_ALL_FESTIVALS,
    ),
    ShoeModel(
        id=3,
        name="Sleek Foxes",
        colour="brown",
        type=ShoeType.OXFORDS,
        price=118,
        image_url="https://groovyfox.bg/wp-content/uploads/2018/04/MBR02029-copy-wh.jpg",
        festival_ids=_ALL_FESTIVALS,
    ),
    ShoeModel(
        id=4,
        name="Sleek Foxes",
        colour="red",
        type=ShoeType.OXFORDS,
        price=118,
        image_url="https://groovyfox.bg/wp-content/uploads/2018/04/MBR01978-wh.jpg",
        festival_ids=_ALL_FESTIVALS,
    ),
    ShoeModel(
        id=5,
        name="Casual Foxes",
        colour="pink",
        type=ShoeType.TRAINERS,
        price=22,
        image_url=(
            "https://www.lindybop.co.uk/media/catalog/product/cache/1/image/"
            "9df78eab33525d08d6e5fb8d27136e95/s/n/sneaker-magenta-polka7_2_.jpg"
        ),
        festival_ids=(SOFIA,),
    ),
    ShoeModel(
        id=6,
        name="Casual Foxes",
        colour="blue",
        type=ShoeType.TRAINERS,
        price=22,
        image_url=(
            "https://www.lindybop.co.uk/media/catalog/product/cache/1/image/"
            "9df78eab33525d08d6e5fb8d27136e95/s/n/sneaker-cobalt-polka6_2_.jpg"
        ),
        festival_ids=(SOFIA,),
    ),
    ShoeModel(
        id=7,
        name="Cute Foxes",
        colour="red",
        type=ShoeType.FLATS,
        price=20,
        image_url=(
            "https://www.lindybop.co.uk/media/catalog/product/cache/1/small_image/365x437/"
            "9df78eab33525d08d6e5fb8d27136e95/i/v/ivy-09-r.jpg"
        ),
        festival_ids=(SOFIA,),
    ),
    ShoeModel(
        id=8,
        name="Cute Foxes",
        colour="black",
        type=ShoeType.FLATS,
        price=20,
        image_url=(
            "https://www.lindybop.co.uk/media/catalog/product/cache/1/small_image/365x437/"
            "9df78eab33525d08d6e5fb8d27136e95/i/v/ivy-09-b.jpg"
        ),
        festival_ids=(SOFIA,),
    ),
)

FESTIVAL_LOCATIONS = (
    FestivalLocation(
        id=ATHENS,
        city="Athens",
        name="Athens Swing Festival",
        period=DateRange(start_date=date(2019, 6, 1), end_date=date(2019, 6, 3)),
        image_url="https://groovyfox.bg/wp-content/uploads/2019/03/athens.jpg",
        model_ids=(1, 2, 3, 4),
    ),
    FestivalLocation(
        id=BELGRADE,
        city="Belgrade",
        name="Belgrade Lindy Exchange",
        period=DateRange(start_date=date(2019, 7, 12), end_date=date(2019, 7, 14)),
        image_url="https://groovyfox.bg/wp-content/uploads/2019/03/belgrade.jpg",
        model_ids=(1, 2, 3, 4),
    ),
    FestivalLocation(
        id=SOFIA,
        city="Sofia",
        name="Sofia Swing Weekend",
        period=DateRange(start_date=date(2019, 8, 23), end_date=date(2019, 8, 25)),
        image_url="https://groovyfox.bg/wp-content/uploads/2019/03/sofia.jpg",
        model_ids=(1, 2, 3, 4, 5, 6, 7, 8),
    ),
)


def default_catalog() -> Catalog:
    """Catalog with the built-in shoe models and festivals."""
    return Catalog(SHOE_MODELS, FESTIVAL_LOCATIONS)
