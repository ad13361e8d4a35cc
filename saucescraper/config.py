from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv


BASE_URL = "https://www.saucedemo.com"

OUTPUT_DIR = "reports"
JSON_FILENAME = "products.json"
CSV_FILENAME = "products.csv"
XLSX_FILENAME = "products.xlsx"

LOGIN_TIMEOUT_MS = 5000
SLOW_MO_MS = 1000

# Login form
USERNAME_SELECTOR = "#user-name"
PASSWORD_SELECTOR = "#password"
LOGIN_BUTTON_SELECTOR = "#login-button"

# Inventory page
INVENTORY_LIST_SELECTOR = ".inventory_list"
INVENTORY_ITEM_SELECTOR = ".inventory_item"
ITEM_NAME_SELECTOR = ".inventory_item_name"
ITEM_DESC_SELECTOR = ".inventory_item_desc"
ITEM_PRICE_SELECTOR = ".inventory_item_price"


class ScraperError(Exception):
    pass


class MissingCredentialsError(ScraperError):
    pass


@dataclass
class Settings:
    username: Optional[str]
    password: Optional[str]
    headless: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            username=env.get("SAUCE_USERNAME"),
            password=env.get("SAUCE_PASSWORD"),
            # Only the exact string "true" turns headless mode on
            headless=env.get("HEADLESS") == "true",
        )

    def validate(self) -> "Settings":
        if not self.username or not self.password:
            raise MissingCredentialsError(
                "SAUCE_USERNAME or SAUCE_PASSWORD is missing in the environment/.env file."
            )
        return self


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load `.env` (without overriding real variables) and return validated settings.

    Raises MissingCredentialsError when either credential is absent or empty.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings.from_env(environ).validate()
