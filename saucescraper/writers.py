from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Sequence, Union

from .config import CSV_FILENAME, JSON_FILENAME, XLSX_FILENAME
from .excel_writer import write_products_to_excel
from .types import Product


CSV_HEADER = "ID,Name,Description,Price"

PathLike = Union[str, Path]


def ensure_output_dir(path: PathLike) -> Path:
    out = Path(path)
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_json(products: Sequence[Product], path: PathLike) -> None:
    data = [p.to_dict() for p in products]
    Path(path).write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def csv_escape(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def write_csv(products: Sequence[Product], path: PathLike) -> None:
    rows = [
        f"{p.id},{csv_escape(p.name)},{csv_escape(p.description)},{csv_escape(p.price)}"
        for p in products
    ]
    # Header ends with a newline, rows are joined without a trailing one
    Path(path).write_text(CSV_HEADER + "\n" + "\n".join(rows), encoding="utf-8")


def write_reports(
    products: Sequence[Product],
    out_dir: PathLike,
    xlsx: bool = False,
) -> Dict[str, Path]:
    """
    Write products.json and products.csv (and products.xlsx when requested) into out_dir.
    Returns the written paths keyed by format.
    """
    out = ensure_output_dir(out_dir)
    written: Dict[str, Path] = {}

    json_path = out / JSON_FILENAME
    write_json(products, json_path)
    written["json"] = json_path

    csv_path = out / CSV_FILENAME
    write_csv(products, csv_path)
    written["csv"] = csv_path

    if xlsx:
        xlsx_path = out / XLSX_FILENAME
        write_products_to_excel(products, out_path=str(xlsx_path))
        written["xlsx"] = xlsx_path

    return written
