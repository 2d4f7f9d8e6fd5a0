from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pricing import Material, Product, parse_number, total_cost
from storage import ProductStore

log = logging.getLogger(__name__)


@dataclass
class Drafts:
    """Text currently sitting in the page's input fields."""

    material_name: str = ""
    unit_cost: str = ""
    percentage: str = ""
    product_name: str = ""

    def clear_material(self) -> None:
        self.material_name = ""
        self.unit_cost = ""
        self.percentage = ""


@dataclass
class Calculator:
    """Working material list plus saved products.

    One instance is built at startup and owns every mutation. Commands are
    synchronous and expect to be called one at a time.
    """

    store: ProductStore
    materials: List[Material] = field(default_factory=list)
    products: List[Product] = field(default_factory=list)
    drafts: Drafts = field(default_factory=Drafts)

    @classmethod
    def load(cls, store: ProductStore) -> Calculator:
        return cls(store=store, products=store.load())

    def total_cost(self) -> float:
        return total_cost(self.materials)

    def add_material(self, name: str, unit_cost_text: str, percentage_text: str) -> Optional[Material]:
        self.drafts.material_name = name
        self.drafts.unit_cost = unit_cost_text
        self.drafts.percentage = percentage_text

        name = name.strip()
        if not (name and unit_cost_text.strip() and percentage_text.strip()):
            return None
        try:
            unit_cost = parse_number(unit_cost_text)
            percentage = parse_number(percentage_text)
        except ValueError as exc:
            log.debug("Rejected material %r: %s", name, exc)
            return None

        material = Material(name=name, unit_cost=unit_cost, percentage=percentage)
        self.materials.append(material)
        self.drafts.clear_material()
        return material

    def delete_material(self, material_id: str) -> bool:
        kept = [m for m in self.materials if m.id != material_id]
        removed = len(kept) != len(self.materials)
        self.materials = kept
        return removed

    def save_product(self, name: str) -> Optional[Product]:
        self.drafts.product_name = name
        name = name.strip()
        if not name or not self.materials:
            return None

        product = Product(
            name=name,
            cost=self.total_cost(),
            materials=tuple(self.materials),
        )
        self.products = self.products + [product]
        self.store.save(self.products)
        log.info("Saved product %r (%s)", product.name, product.id)

        self.materials = []
        self.drafts.product_name = ""
        return product

    def delete_product(self, product_id: str) -> bool:
        kept = [p for p in self.products if p.id != product_id]
        if len(kept) == len(self.products):
            return False
        self.products = kept
        self.store.save(self.products)
        return True
