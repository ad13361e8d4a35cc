import pytest

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


LISTING_HTML = """
<html><body>
<div class="inventory_list">
  <div class="inventory_item">
    <div class="inventory_item_name">Sauce Labs Backpack</div>
    <div class="inventory_item_desc">carry.allTheThings() with the sleek, streamlined Sly Pack.</div>
    <div class="inventory_item_price">$29.99</div>
  </div>
  <div class="inventory_item">
    <div class="inventory_item_name">  Test.allTheThings() T-Shirt (Red)  </div>
    <div class="inventory_item_desc">This classic "Sauce Labs" t-shirt is perfect.</div>
    <div class="inventory_item_price"><span>$</span>15.99</div>
  </div>
</div>
</body></html>
"""


class FakePage:
    """Records Playwright page calls and serves canned HTML."""

    def __init__(self, html=LISTING_HTML, login_ok=True):
        self.html = html
        self.login_ok = login_ok
        self.calls = []

    def goto(self, url):
        self.calls.append(("goto", url))

    def fill(self, selector, value):
        self.calls.append(("fill", selector, value))

    def click(self, selector):
        self.calls.append(("click", selector))

    def wait_for_selector(self, selector, timeout=None):
        self.calls.append(("wait_for_selector", selector, timeout))
        if not self.login_ok:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    def content(self):
        return self.html


@pytest.fixture
def listing_html():
    return LISTING_HTML


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def make_page():
    return FakePage
