from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Page, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .config import (
    BASE_URL,
    INVENTORY_LIST_SELECTOR,
    LOGIN_BUTTON_SELECTOR,
    LOGIN_TIMEOUT_MS,
    PASSWORD_SELECTOR,
    SLOW_MO_MS,
    USERNAME_SELECTOR,
    ScraperError,
)


class LoginError(ScraperError):
    pass


@contextmanager
def open_browser(headless: bool = False, slow_mo: int = SLOW_MO_MS) -> Iterator[Page]:
    """
    Launch Chromium and yield a fresh page.
    The browser is closed and Playwright stopped on every exit path.
    """
    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=headless, slow_mo=slow_mo)
        try:
            context = browser.new_context()
            yield context.new_page()
        finally:
            browser.close()


def login(
    page: Page,
    username: str,
    password: str,
    base_url: str = BASE_URL,
    timeout_ms: int = LOGIN_TIMEOUT_MS,
) -> None:
    """
    Submit the login form and wait for the inventory list.
    Raises LoginError if the inventory does not show up within timeout_ms.
    """
    page.goto(base_url)
    page.fill(USERNAME_SELECTOR, username)
    page.fill(PASSWORD_SELECTOR, password)
    page.click(LOGIN_BUTTON_SELECTOR)
    try:
        page.wait_for_selector(INVENTORY_LIST_SELECTOR, timeout=timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise LoginError(f"inventory list not found within {timeout_ms} ms") from exc


def listing_html(page: Page) -> str:
    return page.content()
