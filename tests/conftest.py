from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from playwright.async_api import Error as PlaywrightError

from alderperson.config import Settings


@dataclass
class DummyKeyboard:
    page: "DummyPage"

    async def press(self, key: str) -> None:
        self.page.record("keyboard.press", key)

    async def type(self, text: str) -> None:
        self.page.record("keyboard.type", text)


class DummyPage:
    """Records calls; ``failures`` maps "method" or "method:first_arg" to an exception to raise."""

    def __init__(
        self,
        elements: set[str] | None = None,
        text: str = "",
        tables: list[list[list[str]]] | None = None,
    ) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.elements = set(elements or ())
        self.invalid_selectors: set[str] = set()
        self.failures: dict[str, BaseException] = {}
        self.text = text
        self.tables = tables or []
        self.url = "about:blank"
        self.keyboard = DummyKeyboard(self)

    def record(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, args, kwargs))
        keys = [name]
        if args:
            keys.append(f"{name}:{args[0]}")
        for key in keys:
            if key in self.failures:
                raise self.failures[key]

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    async def goto(self, url: str, wait_until: str, timeout: int) -> None:
        self.record("goto", url, wait_until=wait_until, timeout=timeout)
        self.url = url

    async def wait_for_selector(self, selector: str, state: str, timeout: int) -> None:
        self.record("wait_for_selector", selector, state=state, timeout=timeout)

    async def query_selector(self, selector: str) -> object | None:
        self.record("query_selector", selector)
        if selector in self.invalid_selectors:
            raise PlaywrightError(f"Unexpected token in selector {selector}")
        return object() if selector in self.elements else None

    async def click(self, selector: str, timeout: int) -> None:
        self.record("click", selector, timeout=timeout)

    async def wait_for_function(self, script: str, arg: Any, timeout: int) -> None:
        self.record("wait_for_function", arg, timeout=timeout)

    async def evaluate(self, script: str) -> Any:
        self.record("evaluate")
        return {"text": self.text, "tables": self.tables}


@dataclass
class DummySession:
    page: DummyPage
    start_error: BaseException | None = None
    close_error: BaseException | None = None
    started: int = 0
    closed: int = 0
    events: list[str] = field(default_factory=list)

    async def start(self) -> None:
        self.started += 1
        if self.start_error is not None:
            raise self.start_error

    async def close(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        lookup_url="https://ward.example.test/lookup",
        navigation_timeout_s=30,
        input_timeout_s=10,
        results_timeout_s=15,
        log_dir=tmp_path / "logs",
    )
