from __future__ import annotations
import math
import re
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

# ASCII digits only; no underscores, no "nan"/"inf" spellings
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

def new_id() -> str:
    return uuid.uuid4().hex

@dataclass(frozen=True)
class Material:
    name: str
    unit_cost: float
    percentage: float
    id: str = field(default_factory=new_id)

    def weighted_cost(self) -> float:
        return self.unit_cost * (self.percentage / 100.0)

    def label(self) -> str:
        return f"{self.name}: {_plain(self.unit_cost)} : {_plain(self.percentage)}%"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "unitCost": self.unit_cost,
            "percentage": self.percentage,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> Material:
        return cls(
            id=str(d["id"]),
            name=str(d["name"]),
            unit_cost=float(d["unitCost"]),
            percentage=float(d["percentage"]),
        )

@dataclass(frozen=True)
class Product:
    name: str
    cost: float
    materials: tuple[Material, ...]
    id: str = field(default_factory=new_id)

    def label(self, currency: str, digits: int = 2) -> str:
        return f"{self.name}: {format_cost(self.cost, digits)} {currency}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "cost": self.cost,
            "materials": [m.to_dict() for m in self.materials],
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> Product:
        return cls(
            id=str(d["id"]),
            name=str(d["name"]),
            cost=float(d["cost"]),
            materials=tuple(Material.from_dict(m) for m in d["materials"]),
        )

def total_cost(materials: Iterable[Material]) -> float:
    """Weighted sum of unit costs; empty input gives 0.0. No rounding."""
    total = 0.0
    for m in materials:
        total += m.weighted_cost()
    return total

def format_cost(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}"

def parse_number(text: str) -> float:
    """Parse user-entered decimal text, rejecting anything non-finite."""
    v = text.strip()
    if not _DECIMAL.fullmatch(v):
        raise ValueError(f"{v!r} is not a number")
    value = float(v)
    if not math.isfinite(value):
        raise ValueError(f"{v!r} is not a finite number")
    return value

def _plain(value: float) -> str:
    # 100.0 -> "100", 12.5 -> "12.5"
    return str(int(value)) if value.is_integer() else str(value)
