"""Tests for the catalog browser application service."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_browser.application.browser_service import CatalogBrowser, ProductDetailService
from catalog_browser.catalog.engine import derive
from catalog_browser.domain.exceptions import ProductNotFoundError
from catalog_browser.domain.models import Product
from catalog_browser.domain.state_machines import Closed
from catalog_browser.domain.value_objects import (
    FilterCriteria,
    FilterField,
    PriceRange,
    SortKey,
)
from catalog_browser.infrastructure.catalog_client import CatalogClient, CatalogClientError


def ids(products: tuple[Product, ...]) -> list[int]:
    return [p.id for p in products]


@pytest.fixture
def browser(catalog: list[Product]) -> CatalogBrowser:
    """Browser with the mixed catalog loaded."""
    browser = CatalogBrowser()
    browser.load_catalog(catalog)
    return browser


class TestRecomputation:
    """Every list-changing operation recomputes exactly once."""

    def test_load_recomputes(self, catalog: list[Product]) -> None:
        browser = CatalogBrowser()
        assert browser.revision == 0
        assert browser.view == ()

        browser.load_catalog(catalog)

        assert browser.revision == 1
        assert browser.view == tuple(catalog)

    def test_commit_recomputes_once(self, browser: CatalogBrowser) -> None:
        browser.open_filter_editor()
        browser.set_draft_category("electronics")
        browser.set_draft_rating(2)
        revision = browser.revision

        browser.commit()

        assert browser.revision == revision + 1
        assert ids(browser.view) == [6]

    def test_draft_edits_do_not_recompute(self, browser: CatalogBrowser) -> None:
        """Neither applied nor the view move until commit."""
        view = browser.view
        revision = browser.revision

        browser.open_filter_editor()
        browser.set_draft_category("jewelery")
        browser.set_draft_price_range(PriceRange.UNDER_50)

        assert browser.revision == revision
        assert browser.view == view
        assert browser.applied == FilterCriteria.default()

    def test_cancel_leaves_list_unchanged(self, browser: CatalogBrowser) -> None:
        browser.open_filter_editor()
        browser.set_draft_category("jewelery")
        browser.commit()
        before_applied = browser.applied
        before_view = browser.view
        revision = browser.revision

        browser.open_filter_editor()
        browser.set_draft_category("electronics")
        browser.cancel()

        assert browser.applied == before_applied
        assert browser.view == before_view
        assert browser.revision == revision

    def test_commit_while_closed_does_not_recompute(self, browser: CatalogBrowser) -> None:
        revision = browser.revision
        assert browser.commit() is False
        assert browser.revision == revision

    def test_sort_applies_immediately(self, browser: CatalogBrowser) -> None:
        revision = browser.revision

        browser.set_sort_key(SortKey.PRICE_LOW)

        assert browser.revision == revision + 1
        assert browser.sort_key is SortKey.PRICE_LOW
        assert ids(browser.view) == [5, 2, 6, 3, 1, 4, 7]

    def test_sort_does_not_touch_open_draft(self, browser: CatalogBrowser) -> None:
        browser.open_filter_editor()
        browser.set_draft_category("jewelery")

        browser.set_sort_key(SortKey.RATING)

        assert browser.selection.draft == FilterCriteria(category="jewelery")
        assert browser.applied == FilterCriteria.default()

    def test_sort_accepts_wire_value(self, browser: CatalogBrowser) -> None:
        """Plain strings are coerced to SortKey."""
        browser.set_sort_key("price-low")

        assert browser.sort_key is SortKey.PRICE_LOW
        assert ids(browser.view) == [5, 2, 6, 3, 1, 4, 7]

        browser.clear_all()
        assert ids(browser.view) == [5, 2, 6, 3, 1, 4, 7]

    def test_unknown_sort_key_falls_back_to_relevance(self, browser: CatalogBrowser) -> None:
        browser.set_sort_key(SortKey.PRICE_HIGH)
        revision = browser.revision

        browser.set_sort_key("newest")

        assert browser.sort_key is SortKey.RELEVANCE
        assert browser.revision == revision + 1
        assert ids(browser.view) == [1, 2, 3, 4, 5, 6, 7]

        browser.clear_all()
        assert ids(browser.view) == [1, 2, 3, 4, 5, 6, 7]

    def test_reload_keeps_criteria_and_sort(
        self, browser: CatalogBrowser, scenario_catalog: list[Product]
    ) -> None:
        browser.set_sort_key(SortKey.PRICE_HIGH)
        browser.open_filter_editor()
        browser.set_draft_price_range(PriceRange.FROM_50_TO_100)
        browser.commit()

        browser.load_catalog(scenario_catalog)

        assert ids(browser.view) == [2]
        assert browser.categories == ("All", "A", "B")


class TestClearAll:
    """Tests for clear_all at the screen level."""

    def test_clear_all(self, browser: CatalogBrowser, catalog: list[Product]) -> None:
        browser.set_sort_key(SortKey.RATING)
        browser.open_filter_editor()
        browser.set_draft_category("men's clothing")
        browser.set_draft_rating(4)
        browser.commit()

        browser.clear_all()

        assert browser.active_count == 0
        assert browser.editor_state == Closed()
        assert browser.view == derive(catalog, FilterCriteria.default(), SortKey.RATING)

    def test_clear_all_from_open_editor(self, browser: CatalogBrowser) -> None:
        browser.open_filter_editor()
        browser.set_draft_category("jewelery")

        browser.clear_all()

        assert browser.selection.draft is None
        assert browser.active_count == 0


class TestScenario:
    """Category, price range, sort, then chip removal."""

    def test_walkthrough(self, scenario_catalog: list[Product]) -> None:
        browser = CatalogBrowser()
        browser.load_catalog(scenario_catalog)

        browser.open_filter_editor()
        browser.set_draft_category("A")
        browser.commit()
        assert ids(browser.view) == [1, 2]

        browser.open_filter_editor()
        browser.set_draft_price_range(PriceRange.FROM_50_TO_100)
        browser.commit()
        assert ids(browser.view) == [2]

        browser.set_sort_key(SortKey.PRICE_HIGH)
        assert ids(browser.view) == [2]

        category_chip = next(c for c in browser.chips if c.field is FilterField.CATEGORY)
        assert category_chip.remove() == FilterCriteria(price_range=PriceRange.FROM_50_TO_100)

        browser.remove_criterion(FilterField.CATEGORY)

        assert browser.applied.category == "All"
        assert browser.applied.price_range is PriceRange.FROM_50_TO_100
        # 500 is outside 50 - 100, so only the 75-priced product remains
        assert ids(browser.view) == [2]
        assert browser.active_count == 1


class TestScreenState:
    """Tests for labels and empty/loading state."""

    def test_result_count_label(self, browser: CatalogBrowser) -> None:
        assert browser.result_count_label == "7 Products"
        browser.open_filter_editor()
        browser.set_draft_category("jewelery")
        browser.commit()
        assert browser.result_count_label == "1 Product"

    def test_not_empty_before_load(self) -> None:
        """Before the first fetch the screen shows loading, not empty."""
        assert not CatalogBrowser().is_empty

    def test_empty_after_exhausting_filters(self, browser: CatalogBrowser) -> None:
        browser.open_filter_editor()
        browser.set_draft_category("jewelery")
        browser.set_draft_price_range(PriceRange.UNDER_50)
        browser.commit()

        assert browser.is_empty
        assert browser.result_count_label == "0 Products"


class TestRefresh:
    """Tests for refresh."""

    @pytest.fixture
    def client(self) -> MagicMock:
        client = MagicMock(spec=CatalogClient)
        client.list_products = AsyncMock()
        return client

    @pytest.mark.asyncio
    async def test_refresh_loads_catalog(
        self, client: MagicMock, catalog: list[Product]
    ) -> None:
        client.list_products.return_value = catalog
        browser = CatalogBrowser()

        loaded = await browser.refresh(client)

        assert loaded is True
        assert browser.view == tuple(catalog)
        assert browser.fetch_error is None
        assert not browser.is_loading

    @pytest.mark.asyncio
    async def test_refresh_failure_keeps_previous_catalog(
        self, client: MagicMock, browser: CatalogBrowser
    ) -> None:
        client.list_products.side_effect = CatalogClientError("Request failed: timeout")
        view = browser.view
        revision = browser.revision

        loaded = await browser.refresh(client)

        assert loaded is False
        assert browser.view == view
        assert browser.revision == revision
        assert browser.fetch_error == "Request failed: timeout"
        assert not browser.is_loading

    @pytest.mark.asyncio
    async def test_successful_refresh_clears_error(
        self, client: MagicMock, catalog: list[Product]
    ) -> None:
        browser = CatalogBrowser()
        client.list_products.side_effect = CatalogClientError("boom", 500)
        await browser.refresh(client)
        assert browser.fetch_error == "boom"

        client.list_products.side_effect = None
        client.list_products.return_value = catalog
        await browser.refresh(client)

        assert browser.fetch_error is None


    @pytest.mark.asyncio
    async def test_loading_until_last_overlapping_refresh_finishes(
        self, client: MagicMock, catalog: list[Product]
    ) -> None:
        """is_loading stays set while any fetch is still in flight."""
        first_release = asyncio.Event()
        second_release = asyncio.Event()
        releases = iter([first_release, second_release])

        async def list_products() -> list[Product]:
            await next(releases).wait()
            return catalog

        client.list_products.side_effect = list_products
        browser = CatalogBrowser()

        first = asyncio.create_task(browser.refresh(client))
        second = asyncio.create_task(browser.refresh(client))
        await asyncio.sleep(0)
        assert browser.is_loading

        first_release.set()
        await first
        assert browser.is_loading

        second_release.set()
        await second
        assert not browser.is_loading


class TestProductDetailService:
    """Tests for ProductDetailService."""

    @pytest.mark.asyncio
    async def test_returns_product(self, product_factory) -> None:
        client = MagicMock(spec=CatalogClient)
        client.get_product = AsyncMock(return_value=product_factory(3))

        product = await ProductDetailService(client).get_product(3)

        assert product.id == 3
        client.get_product.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        client = MagicMock(spec=CatalogClient)
        client.get_product = AsyncMock(return_value=None)

        with pytest.raises(ProductNotFoundError) as exc_info:
            await ProductDetailService(client).get_product(42)
        assert exc_info.value.details["product_id"] == 42

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self) -> None:
        client = MagicMock(spec=CatalogClient)
        client.get_product = AsyncMock(side_effect=CatalogClientError("down"))

        with pytest.raises(CatalogClientError):
            await ProductDetailService(client).get_product(1)
