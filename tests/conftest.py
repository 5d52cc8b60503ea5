"""Shared fixtures for brand directory tests."""

from unittest.mock import MagicMock

import pytest

from models.brand import Brand
from models.envelopes import ExhibitorListEnvelope
from models.exhibitor import Exhibitor


def make_brand(brand_id, name, **kwargs):
    return Brand(BrandID=brand_id, brand_name=name, **kwargs)


@pytest.fixture
def brands():
    """Three brands in server order."""
    return [
        make_brand(1, "zeta", location="London", hall="B", stand_number="A10", product_tag="dolls, games"),
        make_brand(2, "Alpha", location="berlin", hall="a", stand_number="A2"),
        make_brand(3, "mid", location="Paris", hall="C", stand_number="A1",
                   exhibitor={"company": "Acme Toys"}),
    ]


@pytest.fixture
def exhibitors():
    return [
        Exhibitor(ExhibitorID=7, name="Jane Roe", company="Acme Toys"),
        Exhibitor(ExhibitorID=8, name="", company_name="Blocks Ltd"),
    ]


@pytest.fixture
def notifier():
    return MagicMock()


@pytest.fixture
def brand_service(brands):
    service = MagicMock()
    service.list_brands.return_value = list(brands)
    service.search_brands.return_value = [brands[0]]
    service.add_brand.return_value = MagicMock()
    service.edit_brand.return_value = MagicMock()
    return service


@pytest.fixture
def exhibitor_service(exhibitors):
    service = MagicMock()
    service.list_exhibitors.return_value = ExhibitorListEnvelope(data=exhibitors)
    return service
