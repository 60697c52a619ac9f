import json
from pathlib import Path
from typing import Any

import pytest
from cartmerge.order.loader import DefaultItemsLoader, ItemsLoadError
from cartmerge.order.types import LineItem, Product

# ----------------------------
# Helpers
# ----------------------------


def write_json(path: Path, obj: Any) -> Path:
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")
    return path


def write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def load(path: Path) -> tuple[LineItem, ...]:
    return DefaultItemsLoader().load(path)


# ----------------------------
# Happy paths
# ----------------------------


def test_loader_yaml_with_product_table(tmp_path: Path):
    f = write_yaml(
        tmp_path / "items.yaml",
        """
products:
  1: Keyboard
  2: Mouse
items:
  - {product: 1, quantity: 2, price: 15.0}
  - {product: 2, quantity: 1, price: 0}
""",
    )
    items = load(f)

    assert len(items) == 2
    assert items[0].product == Product(id=1)
    assert items[0].product.name == "Keyboard"
    assert (items[0].quantity, items[0].price) == (2, 15.0)
    assert items[1].price == 0.0
    assert isinstance(items[1].price, float)


def test_loader_json_with_string_product_ids(tmp_path: Path):
    f = write_json(
        tmp_path / "items.json",
        {
            "products": {"7": "Cable"},
            "items": [{"product": "7", "quantity": 3, "price": 1.25}],
        },
    )
    [item] = load(f)

    assert item.product.id == 7
    assert item.product.name == "Cable"


def test_loader_inline_product_object(tmp_path: Path):
    f = write_yaml(
        tmp_path / "items.yml",
        """
items:
  - product: {id: 3, name: Lamp}
    quantity: 1
    price: 20
""",
    )
    [item] = load(f)

    assert item.product == Product(id=3)
    assert item.product.name == "Lamp"


def test_loader_keeps_invalid_business_values(tmp_path: Path):
    # negative prices / zero quantities are the order's call, not the loader's
    f = write_yaml(
        tmp_path / "items.yaml",
        """
items:
  - {product: 1, quantity: 0, price: -5}
""",
    )
    [item] = load(f)

    assert (item.quantity, item.price) == (0, -5.0)


def test_loader_empty_items_list(tmp_path: Path):
    f = write_yaml(tmp_path / "items.yaml", "items: []\n")
    assert load(f) == ()


# ----------------------------
# Errors
# ----------------------------


def test_loader_missing_file(tmp_path: Path):
    with pytest.raises(ItemsLoadError) as exc:
        load(tmp_path / "nope.yaml")
    assert exc.value.code == "items_not_found"


def test_loader_unparseable_yaml(tmp_path: Path):
    f = write_yaml(tmp_path / "items.yaml", "items: [\n")
    with pytest.raises(ItemsLoadError) as exc:
        load(f)
    assert exc.value.code == "items_parse_error"


@pytest.mark.parametrize(
    "data,code",
    [
        ([1, 2], "invalid_items_file"),
        ({}, "missing_items"),
        ({"items": {"a": 1}}, "missing_items"),
        ({"products": [1], "items": []}, "invalid_products"),
        ({"products": {"x": "A"}, "items": []}, "invalid_product_id"),
        ({"items": ["oops"]}, "invalid_line"),
        ({"items": [{"product": "abc", "quantity": 1, "price": 1}]}, "invalid_product_id"),
        ({"items": [{"product": True, "quantity": 1, "price": 1}]}, "invalid_product_id"),
        ({"items": [{"product": 1, "quantity": 1.5, "price": 1}]}, "invalid_quantity"),
        ({"items": [{"product": 1, "price": 1}]}, "invalid_quantity"),
        ({"items": [{"product": 1, "quantity": 1, "price": "1"}]}, "invalid_price"),
        ({"items": [{"product": 1, "quantity": 1, "price": False}]}, "invalid_price"),
    ],
)
def test_loader_structural_errors(data, code):
    with pytest.raises(ItemsLoadError) as exc:
        DefaultItemsLoader().load_data(data)
    assert exc.value.code == code


def test_loader_error_reports_line_position():
    with pytest.raises(ItemsLoadError) as exc:
        DefaultItemsLoader().load_data(
            {"items": [{"product": 1, "quantity": 1, "price": 1}, {"product": 1, "quantity": "x", "price": 1}]}
        )
    assert "Line 2" in exc.value.message
    assert exc.value.details == {"line": 2, "value": "x"}
