import json
import logging

import pytest

from pricing import Material, Product
from storage import PRODUCTS_KEY, ProductStore


@pytest.fixture
def products():
    wood = Material("Wood", 100.0, 50.0)
    glue = Material("Glue", 20.0, 10.0)
    return [
        Product(name="Chair", cost=52.0, materials=(wood, glue)),
        Product(name="Shelf", cost=0.125, materials=(Material("Pine", 0.5, 25.0),)),
    ]


def test_missing_file_loads_empty(tmp_path):
    assert ProductStore(str(tmp_path / "nope.json")).load() == []


def test_round_trip(tmp_path, products):
    path = str(tmp_path / "products.json")
    ProductStore(path).save(products)
    assert ProductStore(path).load() == products


def test_layout_on_disk(tmp_path, products):
    path = tmp_path / "products.json"
    ProductStore(str(path)).save(products[:1])
    data = json.loads(path.read_text(encoding="utf-8"))
    entry = data[PRODUCTS_KEY][0]
    assert set(entry) == {"id", "name", "cost", "materials"}
    assert entry["materials"][0] == {
        "id": products[0].materials[0].id,
        "name": "Wood",
        "unitCost": 100.0,
        "percentage": 50.0,
    }


def test_save_is_full_overwrite(tmp_path, products):
    store = ProductStore(str(tmp_path / "products.json"))
    store.save(products)
    store.save(products[1:])
    assert store.load() == products[1:]
    store.save([])
    assert store.load() == []


def test_save_keeps_other_keys(tmp_path, products):
    path = tmp_path / "products.json"
    path.write_text(json.dumps({"theme": "dark"}), encoding="utf-8")
    ProductStore(str(path)).save(products)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["theme"] == "dark"
    assert len(data[PRODUCTS_KEY]) == 2


def test_save_creates_parent_directory(tmp_path, products):
    path = tmp_path / "nested" / "dir" / "products.json"
    ProductStore(str(path)).save(products)
    assert ProductStore(str(path)).load() == products


@pytest.mark.parametrize(
    "content",
    [
        b"{not json",
        b"\xff",
        b'{"savedProducts": [\xff\xfe]}',
        b"[1, 2, 3]",
        json.dumps({PRODUCTS_KEY: [{"name": "Chair"}]}).encode("utf-8"),
        json.dumps({PRODUCTS_KEY: [{"id": "1", "name": "Chair", "cost": "free", "materials": []}]}).encode("utf-8"),
        json.dumps({PRODUCTS_KEY: 5}).encode("utf-8"),
    ],
)
def test_malformed_content_falls_back_to_empty(tmp_path, caplog, content):
    path = tmp_path / "products.json"
    path.write_bytes(content)
    with caplog.at_level(logging.WARNING, logger="storage"):
        assert ProductStore(str(path)).load() == []
    assert "Ignoring" in caplog.text


def test_write_failure_is_logged_not_raised(tmp_path, caplog, products):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = ProductStore(str(blocker / "products.json"))
    with caplog.at_level(logging.ERROR, logger="storage"):
        store.save(products)
    assert "Failed to write" in caplog.text


def test_custom_key(tmp_path, products):
    path = str(tmp_path / "products.json")
    ProductStore(path, key="other").save(products)
    assert ProductStore(path).load() == []
    assert ProductStore(path, key="other").load() == products


def test_save_over_undecodable_file(tmp_path, products):
    path = tmp_path / "products.json"
    path.write_bytes(b"\xff\xfe")
    store = ProductStore(str(path))
    store.save(products)
    assert store.load() == products


def test_failed_replace_leaves_no_temp_file(tmp_path, caplog, monkeypatch, products):
    path = tmp_path / "products.json"

    def refuse(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("storage.os.replace", refuse)
    with caplog.at_level(logging.ERROR, logger="storage"):
        ProductStore(str(path)).save(products)
    assert "Failed to write" in caplog.text
    assert not (tmp_path / "products.json.tmp").exists()
    assert not path.exists()
