"""
SauceDemo product scraper package.

Exports:
- Product: dataclass representing a scraped product
- scrape_to_files: log in, scrape the inventory and save JSON/CSV reports
"""

from .types import Product
from .cli import scrape_to_files

__all__ = ["Product", "scrape_to_files"]
