from __future__ import annotations

import pytest
from playwright._impl._errors import TargetClosedError

from alderperson.browser.selectors import ADDRESS_INPUT_SELECTORS, SUBMIT_SELECTORS, FieldLocator
from conftest import DummyPage


@pytest.mark.asyncio
async def test_locate_returns_first_candidate_in_list_order() -> None:
    page = DummyPage(elements={"input#address", 'input[type="text"]'})
    locator = FieldLocator(page)

    selector = await locator.locate("address input", ADDRESS_INPUT_SELECTORS)

    assert selector == 'input[type="text"]'
    probed = [call[1][0] for call in page.calls if call[0] == "query_selector"]
    assert probed == ['input[type="text"]']


@pytest.mark.asyncio
async def test_locate_skips_unmatched_candidates() -> None:
    page = DummyPage(elements={"input#address"})
    locator = FieldLocator(page)

    selector = await locator.locate("address input", ADDRESS_INPUT_SELECTORS)

    assert selector == "input#address"
    probed = [call[1][0] for call in page.calls if call[0] == "query_selector"]
    assert probed == list(ADDRESS_INPUT_SELECTORS[:3])


@pytest.mark.asyncio
async def test_locate_returns_none_when_nothing_matches() -> None:
    page = DummyPage(elements={"textarea"})
    locator = FieldLocator(page)

    assert await locator.locate("submit control", SUBMIT_SELECTORS) is None
    assert page.call_names().count("query_selector") == len(SUBMIT_SELECTORS)


@pytest.mark.asyncio
async def test_locate_treats_rejected_selector_as_no_match() -> None:
    page = DummyPage(elements={'button:has-text("Find")'})
    page.invalid_selectors.add('button:has-text("Search")')
    locator = FieldLocator(page)

    selector = await locator.locate("submit control", SUBMIT_SELECTORS)

    assert selector == 'button:has-text("Find")'


def test_address_candidates_keep_priority_order() -> None:
    assert ADDRESS_INPUT_SELECTORS[0] == 'input[type="text"]'
    assert ADDRESS_INPUT_SELECTORS[-1] == 'input[placeholder*="address" i]'
    assert SUBMIT_SELECTORS[:2] == ('input[type="submit"]', 'button[type="submit"]')


@pytest.mark.asyncio
async def test_locate_propagates_closed_browser() -> None:
    page = DummyPage(elements={"input#address"})
    page.failures['query_selector:input[type="text"]'] = TargetClosedError()
    locator = FieldLocator(page)

    with pytest.raises(TargetClosedError):
        await locator.locate("address input", ADDRESS_INPUT_SELECTORS)

    assert page.call_names() == ["query_selector"]
