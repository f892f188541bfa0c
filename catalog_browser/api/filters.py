"""Filter and sort API endpoints.

Drives the staged filter editor (open, edit draft, commit, cancel), the
active-filter chips and the sort key.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from catalog_browser.api.products import browser_to_response
from catalog_browser.api.schemas import (
    CriteriaSchema,
    DraftUpdateRequest,
    EditorStateResponse,
    FilterOptionsResponse,
    OptionSchema,
    ProductListResponse,
    SortRequest,
)
from catalog_browser.application.browser_service import CatalogBrowser, get_catalog_browser
from catalog_browser.domain.value_objects import (
    RATING_THRESHOLDS,
    FilterField,
    PriceRange,
    SortKey,
    rating_label,
)

router = APIRouter(tags=["Filters"])

BrowserDep = Annotated[CatalogBrowser, Depends(get_catalog_browser)]


def editor_to_response(browser: CatalogBrowser) -> EditorStateResponse:
    """Convert the editor state to the response schema."""
    draft = browser.selection.draft
    return EditorStateResponse(
        status=browser.editor_state.status,
        draft=CriteriaSchema.from_criteria(draft) if draft is not None else None,
        applied=CriteriaSchema.from_criteria(browser.applied),
        active_count=browser.active_count,
    )


# ============================================================================
# Options
# ============================================================================


@router.get(
    "/filters/options",
    response_model=FilterOptionsResponse,
    summary="Filter options",
    description="Categories, price ranges, ratings and sort options to choose from.",
)
async def get_filter_options(browser: BrowserDep) -> FilterOptionsResponse:
    """List selectable filter and sort options."""
    return FilterOptionsResponse(
        categories=list(browser.categories),
        price_ranges=[OptionSchema(label=r.label, value=r.value) for r in PriceRange],
        ratings=[OptionSchema(label=rating_label(t), value=t) for t in RATING_THRESHOLDS],
        sort_options=[OptionSchema(label=k.label, value=k.value) for k in SortKey],
    )


# ============================================================================
# Filter Editor
# ============================================================================


@router.get(
    "/filters/editor",
    response_model=EditorStateResponse,
    summary="Filter editor state",
)
async def get_editor(browser: BrowserDep) -> EditorStateResponse:
    """Get the filter editor state."""
    return editor_to_response(browser)


@router.post(
    "/filters/editor/open",
    response_model=EditorStateResponse,
    summary="Open filter editor",
    description="Start editing a draft seeded from the applied filters.",
)
async def open_editor(browser: BrowserDep) -> EditorStateResponse:
    """Open (or re-seed) the filter editor."""
    browser.open_filter_editor()
    return editor_to_response(browser)


@router.patch(
    "/filters/editor/draft",
    response_model=EditorStateResponse,
    summary="Edit draft",
    description="Change draft fields. Ignored while the editor is closed.",
)
async def update_draft(
    request: DraftUpdateRequest,
    browser: BrowserDep,
) -> EditorStateResponse:
    """Update draft criteria.

    Args:
        request: Fields to change.

    Returns:
        Editor state; the applied filters are unchanged.
    """
    if request.category is not None:
        browser.set_draft_category(request.category)
    if request.price_range is not None:
        browser.set_draft_price_range(request.price_range)
    if request.min_rating is not None:
        browser.set_draft_rating(request.min_rating)
    return editor_to_response(browser)


@router.post(
    "/filters/editor/commit",
    response_model=ProductListResponse,
    summary="Apply filters",
    description="Apply the draft and close the editor.",
)
async def commit_editor(browser: BrowserDep) -> ProductListResponse:
    """Apply the draft filters."""
    browser.commit()
    return browser_to_response(browser)


@router.post(
    "/filters/editor/cancel",
    response_model=EditorStateResponse,
    summary="Cancel filter edit",
    description="Discard the draft and close the editor.",
)
async def cancel_editor(browser: BrowserDep) -> EditorStateResponse:
    """Discard the draft filters."""
    browser.cancel()
    return editor_to_response(browser)


@router.post(
    "/filters/clear",
    response_model=ProductListResponse,
    summary="Clear all filters",
)
async def clear_filters(browser: BrowserDep) -> ProductListResponse:
    """Reset all filters and close the editor."""
    browser.clear_all()
    return browser_to_response(browser)


@router.delete(
    "/filters/chips/{field}",
    response_model=ProductListResponse,
    status_code=status.HTTP_200_OK,
    summary="Remove filter chip",
    description="Reset one applied filter without opening the editor.",
)
async def remove_chip(field: FilterField, browser: BrowserDep) -> ProductListResponse:
    """Remove one active filter.

    Args:
        field: Criterion to reset.
    """
    browser.remove_criterion(field)
    return browser_to_response(browser)


# ============================================================================
# Sort
# ============================================================================


@router.put(
    "/sort",
    response_model=ProductListResponse,
    summary="Set sort order",
    description="Change the sort key. Applies immediately.",
)
async def set_sort(request: SortRequest, browser: BrowserDep) -> ProductListResponse:
    """Set the sort key."""
    browser.set_sort_key(request.sort_key)
    return browser_to_response(browser)
