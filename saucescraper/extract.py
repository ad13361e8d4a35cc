from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from .config import (
    INVENTORY_ITEM_SELECTOR,
    ITEM_DESC_SELECTOR,
    ITEM_NAME_SELECTOR,
    ITEM_PRICE_SELECTOR,
)
from .types import NOT_AVAILABLE, Product


def _text(el) -> str:
    # Plain text content, no separator between child nodes ("$" + "29.99")
    text = (el.get_text() if el else "").strip()
    return text or NOT_AVAILABLE


def extract_products(html: str) -> List[Product]:
    soup = BeautifulSoup(html, "lxml")
    products: List[Product] = []
    for idx, item in enumerate(soup.select(INVENTORY_ITEM_SELECTOR), start=1):
        products.append(
            Product(
                id=idx,
                name=_text(item.select_one(ITEM_NAME_SELECTOR)),
                description=_text(item.select_one(ITEM_DESC_SELECTOR)),
                price=_text(item.select_one(ITEM_PRICE_SELECTOR)),
            )
        )
    return products
