from __future__ import annotations

from typing import Iterable, Optional

from openpyxl import Workbook

from .types import Product


DEFAULT_HEADERS = [
    "ID",
    "Name",
    "Description",
    "Price",
]


def write_products_to_excel(
    products: Iterable[Product],
    out_path: str,
    headers: Optional[list[str]] = None,
) -> None:
    headers = headers or DEFAULT_HEADERS

    wb = Workbook()
    ws = wb.active
    ws.title = "Products"

    for col_idx, title in enumerate(headers, start=1):
        ws.cell(row=1, column=col_idx).value = title

    for idx, p in enumerate(products, start=2):
        ws.cell(row=idx, column=1).value = p.id
        ws.cell(row=idx, column=2).value = p.name
        ws.cell(row=idx, column=3).value = p.description
        ws.cell(row=idx, column=4).value = p.price

    wb.save(out_path)
