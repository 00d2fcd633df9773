"""Pytest configuration and fixtures"""
import pytest

from till.cart import Cart
from till.receipt import ListSink
from till.services.pricing import CatalogPricer

TILL_ENV_VARS = (
    "TILL_CURRENCY",
    "TILL_LINE_FORMAT",
    "TILL_CONSUME_ON_RECEIPT",
    "TILL_PRICE_CATALOG",
)


@pytest.fixture(autouse=True)
def clean_till_env(monkeypatch):
    """Keep the developer's TILL_* variables out of the tests"""
    for name in TILL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def pricer():
    """Default catalog: apple 1.00, banana 2.00"""
    return CatalogPricer()


@pytest.fixture
def cart(pricer):
    """Euro cart with the default line format"""
    return Cart(pricer)


@pytest.fixture
def sink():
    """In-memory receipt sink"""
    return ListSink()


@pytest.fixture
def price_csv(tmp_path):
    """Small CSV price list"""
    path = tmp_path / "prices.csv"
    path.write_text("name,price\napple,100\nbanana,200\npen,150\n", encoding="utf-8")
    return path
