from __future__ import annotations

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Callable

import pytest

from site_smoke.config import SiteExpectations


class FakeElement:
    def __init__(self, value: Any = None, on_click: Callable[[], None] | None = None) -> None:
        self.value = value
        self.on_click = on_click
        self.clicks = 0
        self.expressions: list[str] = []

    def click(self) -> None:
        self.clicks += 1
        if self.on_click is not None:
            self.on_click()

    def evaluate(self, expression: str, arg: Any = None) -> Any:
        self.expressions.append(expression)
        return self.value


class FakePage:
    def __init__(
        self,
        elements: dict[str, list[FakeElement]] | None = None,
        status: int | None = 200,
        goto_error: Exception | None = None,
    ) -> None:
        self.elements = elements or {}
        self.status = status
        self.goto_error = goto_error
        self.goto_calls: list[dict[str, Any]] = []
        self.waits: list[int] = []

    def goto(self, url: str, wait_until: str | None = None, timeout: float | None = None) -> Any:
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error is not None:
            raise self.goto_error
        if self.status is None:
            return None
        return SimpleNamespace(status=self.status)

    def query_selector(self, selector: str) -> FakeElement | None:
        found = self.elements.get(selector) or []
        return found[0] if found else None

    def query_selector_all(self, selector: str) -> list[FakeElement]:
        return list(self.elements.get(selector) or [])

    def eval_on_selector_all(self, selector: str, expression: str) -> list[Any]:
        return [element.value for element in self.query_selector_all(selector)]

    def wait_for_timeout(self, timeout: float) -> None:
        self.waits.append(int(timeout))


class FakeBrowser:
    def __init__(self) -> None:
        self.closed = 0
        self.pages: list[FakePage] = []

    def new_page(self) -> FakePage:
        page = FakePage()
        self.pages.append(page)
        return page

    def close(self) -> None:
        self.closed += 1


class FakeChromium:
    def __init__(self) -> None:
        self.browser = FakeBrowser()
        self.launches: list[dict[str, Any]] = []

    def launch(self, **kwargs: Any) -> FakeBrowser:
        self.launches.append(kwargs)
        return self.browser


def fake_sync_playwright(chromium: FakeChromium) -> Callable[[], Any]:
    @contextmanager
    def sync_playwright() -> Any:
        yield SimpleNamespace(chromium=chromium)

    return sync_playwright


def healthy_elements(site: SiteExpectations) -> dict[str, list[FakeElement]]:
    menu = FakeElement(value=False)

    def open_menu() -> None:
        menu.value = True

    elements: dict[str, list[FakeElement]] = {f"#{section}": [FakeElement()] for section in site.sections}
    elements[site.menu_trigger] = [FakeElement(on_click=open_menu)]
    elements[f"#{site.menu_id}"] = [menu]
    elements[site.tea_card_selector] = [FakeElement(), FakeElement()]
    elements[site.service_card_selector] = [
        FakeElement('linear-gradient(135deg, rgb(46, 125, 50), rgb(102, 187, 106))'),
        FakeElement('linear-gradient(135deg, rgb(121, 85, 72), rgb(161, 136, 127))'),
        FakeElement('linear-gradient(135deg, rgb(255, 143, 0), rgb(255, 193, 7))'),
    ]
    elements[site.image_selector] = [FakeElement(True), FakeElement(True), FakeElement(True)]
    elements[site.nav_link_selector] = [FakeElement() for _ in range(5)]
    return elements


@pytest.fixture
def site() -> SiteExpectations:
    return SiteExpectations(url="https://example.test/")


@pytest.fixture
def healthy_page(site: SiteExpectations) -> FakePage:
    return FakePage(healthy_elements(site))
