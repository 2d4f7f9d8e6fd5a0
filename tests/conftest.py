"""Pytest fixtures for the cost calculator tests."""

import pytest

from app import create_app
from calculator import Calculator
from storage import ProductStore


class RecordingStore(ProductStore):
    """ProductStore that remembers every collection it was asked to write."""

    def __init__(self, path):
        super().__init__(path)
        self.writes = []

    def save(self, products):
        self.writes.append(list(products))
        super().save(products)


@pytest.fixture
def store(tmp_path):
    return RecordingStore(str(tmp_path / "products.json"))


@pytest.fixture
def calculator(store):
    return Calculator.load(store)


@pytest.fixture
def defaults():
    return {
        "title": "Product Manufacturing Cost Calculator",
        "currency": "ETB",
        "display_digits": 2,
    }


@pytest.fixture
def client(calculator, defaults):
    app = create_app(calculator=calculator, defaults=defaults)
    app.config["TESTING"] = True
    return app.test_client()
