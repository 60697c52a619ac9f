# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Cartmerge Contributors
#
# This file is part of Cartmerge.
#
# Cartmerge is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Cartmerge is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from cartmerge.order.types import LineItem, Product


@dataclass(frozen=True, slots=True)
class ItemsLoadError(Exception):
    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


def _as_int(value: Any) -> int | None:
    # bool is an int subclass, but "true" is never a valid id or quantity
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


class DefaultItemsLoader:
    """
    Loads item lines from a YAML or JSON file.

    Only the file structure is checked here. Whether a line is acceptable
    (price, quantity) is decided by the Order it is added to.
    """

    def load(self, path: Path) -> tuple[LineItem, ...]:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ItemsLoadError(code="items_not_found", message=f"Items file does not exist: {path}")

        raw = path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw) if path.suffix.lower() == ".json" else yaml.safe_load(raw)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ItemsLoadError(
                code="items_parse_error",
                message=f"Cannot parse items file {path}: {e}",
                details={"path": str(path)},
            ) from e

        return self.load_data(data)

    def load_data(self, data: Any) -> tuple[LineItem, ...]:
        if not isinstance(data, dict):
            raise ItemsLoadError(code="invalid_items_file", message="Items file root must be a mapping/object.")

        products = self._parse_products(data.get("products"))

        raw_items = data.get("items")
        if not isinstance(raw_items, list):
            raise ItemsLoadError(code="missing_items", message="'items' must be a list.")

        return tuple(self._parse_line(pos, entry, products) for pos, entry in enumerate(raw_items, start=1))

    def _parse_products(self, raw: Any) -> dict[int, Product]:
        if raw is None:
            return {}

        if not isinstance(raw, dict):
            raise ItemsLoadError(code="invalid_products", message="'products' must be a mapping of id -> name.")

        out: dict[int, Product] = {}
        for pid, name in raw.items():
            product_id = _as_int(pid)
            if product_id is None:
                raise ItemsLoadError(
                    code="invalid_product_id",
                    message=f"Product id must be an integer, got {pid!r}",
                )
            out[product_id] = Product(id=product_id, name=str(name) if name is not None else None)
        return out

    def _parse_line(self, pos: int, entry: Any, products: Mapping[int, Product]) -> LineItem:
        if not isinstance(entry, dict):
            raise ItemsLoadError(code="invalid_line", message=f"Line {pos} must be a mapping/object.")

        product = self._parse_product_ref(pos, entry.get("product"), products)

        quantity = _as_int(entry.get("quantity"))
        if quantity is None:
            raise ItemsLoadError(
                code="invalid_quantity",
                message=f"Line {pos}: 'quantity' must be an integer.",
                details={"line": pos, "value": entry.get("quantity")},
            )

        price = entry.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ItemsLoadError(
                code="invalid_price",
                message=f"Line {pos}: 'price' must be a number.",
                details={"line": pos, "value": price},
            )

        return LineItem(product=product, quantity=quantity, price=float(price))

    def _parse_product_ref(self, pos: int, raw: Any, products: Mapping[int, Product]) -> Product:
        # Support:
        #   product: 1
        # OR:
        #   product: { id: 1, name: "Keyboard" }
        name = None
        if isinstance(raw, dict):
            name = raw.get("name")
            raw = raw.get("id")

        product_id = _as_int(raw)
        if product_id is None:
            raise ItemsLoadError(
                code="invalid_product_id",
                message=f"Line {pos}: 'product' must be an integer id.",
                details={"line": pos, "value": raw},
            )

        if product_id in products:
            return products[product_id]
        return Product(id=product_id, name=str(name) if name is not None else None)
