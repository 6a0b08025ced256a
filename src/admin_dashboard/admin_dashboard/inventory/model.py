from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """Stock item; ``image`` is a data URL so the table can show it inline."""

    key: str
    name: str
    code: str
    type: str
    price: float
    quantity: int
    image: str
