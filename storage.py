from __future__ import annotations

import json
import logging
import os
from typing import Any, List

from pricing import Product

log = logging.getLogger(__name__)

PRODUCTS_KEY = "savedProducts"


class ProductStore:
    """Durable key-value slot for saved products.

    The slot is a JSON object file; the product collection lives under a
    fixed key and is always written in full. Other keys in the file are
    left as they were.
    """

    def __init__(self, path: str, key: str = PRODUCTS_KEY) -> None:
        self.path = path
        self.key = key

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable product store %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring product store %s: expected a JSON object", self.path)
            return {}
        return data

    def load(self) -> List[Product]:
        raw = self._read().get(self.key)
        if raw is None:
            return []
        try:
            return [Product.from_dict(entry) for entry in raw]
        except (TypeError, KeyError, ValueError) as exc:
            log.warning("Ignoring malformed %r in %s: %s", self.key, self.path, exc)
            return []

    def save(self, products: List[Product]) -> None:
        data = self._read()
        data[self.key] = [p.to_dict() for p in products]
        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            log.error("Failed to write product store %s: %s", self.path, exc)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
