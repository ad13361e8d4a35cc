from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from playwright.sync_api import Page

from .browser import LoginError, listing_html, login, open_browser
from .config import (
    BASE_URL,
    LOGIN_TIMEOUT_MS,
    OUTPUT_DIR,
    SLOW_MO_MS,
    MissingCredentialsError,
    Settings,
    load_settings,
)
from .extract import extract_products
from .types import Product
from .writers import write_reports


MESSAGES = {
    "en": {
        "start": "Starting scraper...",
        "headless": "> Headless mode: {headless}",
        "user": "> Target User: {username}",
        "navigate": "Navigating to {url}",
        "logging_in": "Logging in...",
        "login_ok": "Login successful. Inventory loaded.",
        "login_failed": "Login failed. Inventory list not found. Check your credentials.",
        "scraping": "Scraping products...",
        "scraped": "Successfully scraped {count} products.",
        "nothing_to_save": "No products found, nothing to save.",
        "saved": "{kind} report saved to: {path}",
        "error": "An error occurred during execution: {error}",
        "closed": "Browser closed.",
        "missing_credentials": "Error: {error}",
        "interrupted": "Interrupted by user",
        "help_desc": (
            "Log into saucedemo.com and export the product listing to JSON and CSV.\n"
            "Credentials are read from SAUCE_USERNAME / SAUCE_PASSWORD (environment or .env)."
        ),
        "help_out": "Directory for reports (default reports)",
        "help_base_url": "Site URL (default https://www.saucedemo.com)",
        "help_headless": "Run the browser headless (also HEADLESS=true)",
        "help_timeout": "How long to wait for the inventory after login (ms)",
        "help_slow_mo": "Delay between browser actions (ms)",
        "help_xlsx": "Also save the products to an Excel file",
        "help_lang": "Messages language: en or ru (default en)",
    },
    "ru": {
        "start": "Запуск парсера…",
        "headless": "> Безголовый режим: {headless}",
        "user": "> Пользователь: {username}",
        "navigate": "Переход на {url}",
        "logging_in": "Вход в систему…",
        "login_ok": "Вход выполнен. Каталог загружен.",
        "login_failed": "Не удалось войти. Список товаров не найден. Проверьте учётные данные.",
        "scraping": "Сбор товаров…",
        "scraped": "Собрано товаров: {count}.",
        "nothing_to_save": "Товары не найдены, сохранять нечего.",
        "saved": "Отчёт {kind} сохранён: {path}",
        "error": "Ошибка во время выполнения: {error}",
        "closed": "Браузер закрыт.",
        "missing_credentials": "Ошибка: {error}",
        "interrupted": "Прервано пользователем",
        "help_desc": (
            "Вход на saucedemo.com и экспорт списка товаров в JSON и CSV.\n"
            "Учётные данные берутся из SAUCE_USERNAME / SAUCE_PASSWORD (окружение или .env)."
        ),
        "help_out": "Каталог для отчётов (по умолчанию reports)",
        "help_base_url": "Адрес сайта (по умолчанию https://www.saucedemo.com)",
        "help_headless": "Запуск браузера без окна (также HEADLESS=true)",
        "help_timeout": "Ожидание каталога после входа (мс)",
        "help_slow_mo": "Задержка между действиями браузера (мс)",
        "help_xlsx": "Дополнительно сохранить товары в Excel",
        "help_lang": "Язык сообщений: en или ru (по умолчанию en)",
    },
}


def _msg(lang: str, key: str, **kwargs) -> str:
    lang_key = lang if lang in MESSAGES else "en"
    template = MESSAGES[lang_key].get(key, "")
    return template.format(**kwargs)


def _scrape_page(
    page: Page,
    settings: Settings,
    products: List[Product],
    out_dir: str,
    base_url: str,
    timeout_ms: int,
    xlsx: bool,
    lang: str,
) -> None:
    print(_msg(lang, "navigate", url=base_url), flush=True)
    print(_msg(lang, "logging_in"), flush=True)
    try:
        login(page, settings.username, settings.password, base_url=base_url, timeout_ms=timeout_ms)
        print(_msg(lang, "login_ok"), flush=True)
    except LoginError:
        print(_msg(lang, "login_failed"), file=sys.stderr)
        raise

    print(_msg(lang, "scraping"), flush=True)
    scraped = extract_products(listing_html(page))
    print(_msg(lang, "scraped", count=len(scraped)), flush=True)

    if not scraped:
        print(_msg(lang, "nothing_to_save"), flush=True)
        return

    written = write_reports(scraped, out_dir, xlsx=xlsx)
    for kind, path in written.items():
        print(_msg(lang, "saved", kind=kind.upper(), path=path), flush=True)
    # Only a fully saved run hands its products back
    products.extend(scraped)


def scrape_to_files(
    settings: Settings,
    out_dir: str = OUTPUT_DIR,
    base_url: str = BASE_URL,
    timeout_ms: int = LOGIN_TIMEOUT_MS,
    slow_mo: int = SLOW_MO_MS,
    xlsx: bool = False,
    lang: str = "en",
) -> List[Product]:
    """Log in, scrape the inventory page and save the reports.

    Errors after the browser is up are reported and swallowed so the browser
    is always closed. Returns the saved products, empty on failure.
    """
    print(_msg(lang, "start"), flush=True)
    print(_msg(lang, "headless", headless=settings.headless), flush=True)
    print(_msg(lang, "user", username=settings.username), flush=True)

    products: List[Product] = []
    with open_browser(headless=settings.headless, slow_mo=slow_mo) as page:
        try:
            _scrape_page(page, settings, products, out_dir, base_url, timeout_ms, xlsx, lang)
        except Exception as exc:
            print(_msg(lang, "error", error=exc), file=sys.stderr)
    print(_msg(lang, "closed"), flush=True)
    return products


def _build_arg_parser(lang: str = "en") -> argparse.ArgumentParser:
    loc = MESSAGES.get(lang, MESSAGES["en"])
    p = argparse.ArgumentParser(
        prog="saucescraper",
        description=loc["help_desc"],
    )
    p.add_argument(
        "-o",
        "--out-dir",
        dest="out_dir",
        default=OUTPUT_DIR,
        help=loc["help_out"],
    )
    p.add_argument(
        "-u",
        "--base-url",
        dest="base_url",
        default=BASE_URL,
        help=loc["help_base_url"],
    )
    p.add_argument(
        "--headless",
        dest="headless",
        action="store_true",
        default=False,
        help=loc["help_headless"],
    )
    p.add_argument(
        "-t",
        "--timeout",
        dest="timeout_ms",
        type=int,
        default=LOGIN_TIMEOUT_MS,
        help=loc["help_timeout"],
    )
    p.add_argument(
        "-s",
        "--slow-mo",
        dest="slow_mo",
        type=int,
        default=SLOW_MO_MS,
        help=loc["help_slow_mo"],
    )
    p.add_argument(
        "--xlsx",
        dest="xlsx",
        action="store_true",
        default=False,
        help=loc["help_xlsx"],
    )
    p.add_argument(
        "--lang",
        dest="lang",
        choices=["en", "ru"],
        default=lang,
        help=loc["help_lang"],
    )
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_arg_parser("en")
    args = parser.parse_args(argv)
    lang = args.lang

    try:
        settings = load_settings()
    except MissingCredentialsError as exc:
        print(_msg(lang, "missing_credentials", error=exc), file=sys.stderr)
        return 1
    if args.headless:
        settings.headless = True

    try:
        scrape_to_files(
            settings,
            out_dir=args.out_dir,
            base_url=args.base_url,
            timeout_ms=args.timeout_ms,
            slow_mo=args.slow_mo,
            xlsx=args.xlsx,
            lang=lang,
        )
        return 0
    except KeyboardInterrupt:
        print(_msg(lang, "interrupted"), file=sys.stderr)
        return 130
    except Exception as exc:
        print(_msg(lang, "error", error=exc), file=sys.stderr)
        return 1
