"""Staged selection controller.

Implements the two-phase editing protocol for filters: edits go to a draft
while the editor is open and only reach the applied criteria on commit.
"""

import structlog

from catalog_browser.catalog.summary import describe
from catalog_browser.domain.state_machines import (
    Closed,
    EditorState,
    Editing,
    validate_editor_transition,
)
from catalog_browser.domain.value_objects import FilterCriteria, FilterField, PriceRange

logger = structlog.get_logger()


class StagedSelectionController:
    """Owner of the applied and draft filter criteria.

    ``applied`` changes only through ``commit``, ``clear_all`` and
    ``remove_criterion``. Draft setters touch the draft alone and are
    ignored while the editor is closed.

    Example usage:
        controller = StagedSelectionController()
        controller.open_filter_editor()
        controller.set_draft_category("electronics")
        controller.commit()
        controller.applied.category  # "electronics"
    """

    def __init__(self, applied: FilterCriteria | None = None) -> None:
        self._applied = applied or FilterCriteria.default()
        self._state: EditorState = Closed()

    @property
    def applied(self) -> FilterCriteria:
        """Criteria currently driving the visible list."""
        return self._applied

    @property
    def state(self) -> EditorState:
        """Current editor state."""
        return self._state

    @property
    def draft(self) -> FilterCriteria | None:
        """Draft criteria while editing, otherwise None."""
        if isinstance(self._state, Editing):
            return self._state.draft
        return None

    @property
    def is_editing(self) -> bool:
        """Whether the filter editor is open."""
        return self._state.status.is_editing()

    def _transition(self, state: EditorState) -> None:
        validate_editor_transition(self._state.status, state.status)
        self._state = state

    # ------------------------------------------------------------------
    # Editor lifecycle
    # ------------------------------------------------------------------

    def open_filter_editor(self) -> FilterCriteria:
        """Open the editor with a draft seeded from the applied criteria.

        Re-opening while already editing discards the unconfirmed draft.

        Returns:
            The freshly seeded draft.
        """
        self._transition(Editing(draft=self._applied))
        logger.debug("Filter editor opened", applied=self._applied.to_dict())
        return self._applied

    def commit(self) -> bool:
        """Apply the draft and close the editor.

        Returns:
            True if the editor was open (applied now equals the draft),
            False if there was nothing to commit.
        """
        if not isinstance(self._state, Editing):
            logger.debug("Commit ignored, filter editor is closed")
            return False
        draft = self._state.draft
        self._transition(Closed())
        self._applied = draft
        logger.info("Filters applied", applied=draft.to_dict())
        return True

    def cancel(self) -> bool:
        """Discard the draft and close the editor.

        Returns:
            True if a draft was discarded.
        """
        if not isinstance(self._state, Editing):
            return False
        self._transition(Closed())
        logger.debug("Filter edit cancelled")
        return True

    def clear_all(self) -> None:
        """Reset draft and applied criteria and close the editor."""
        self._applied = FilterCriteria.default()
        if self.is_editing:
            self._transition(Closed())
        logger.info("Filters cleared")

    # ------------------------------------------------------------------
    # Draft setters
    # ------------------------------------------------------------------

    def _live_draft(self, field: str) -> FilterCriteria | None:
        draft = self.draft
        if draft is None:
            logger.debug("Draft update ignored, filter editor is closed", field=field)
        return draft

    def set_draft_category(self, category: str) -> None:
        """Select a category in the draft."""
        draft = self._live_draft("category")
        if draft is not None:
            self._state = Editing(draft=draft.with_category(category))

    def set_draft_price_range(self, price_range: PriceRange) -> None:
        """Select a price range in the draft."""
        draft = self._live_draft("price_range")
        if draft is not None:
            self._state = Editing(draft=draft.with_price_range(price_range))

    def set_draft_rating(self, min_rating: int) -> None:
        """Select a minimum rating in the draft."""
        draft = self._live_draft("min_rating")
        if draft is not None:
            self._state = Editing(draft=draft.with_min_rating(min_rating))

    # ------------------------------------------------------------------
    # Chip removal
    # ------------------------------------------------------------------

    def remove_criterion(self, field: FilterField) -> FilterCriteria:
        """Reset one applied field, bypassing the draft phase.

        Goes through the chip's own removal action. A field without a chip
        is already at its default, so applied is returned unchanged. The
        editor state (and any open draft) is left as it is.

        Args:
            field: Field whose chip was removed.

        Returns:
            The new applied criteria.
        """
        chip = next((c for c in describe(self._applied) if c.field == field), None)
        if chip is None:
            logger.debug("Filter removal ignored, field not active", field=field.value)
            return self._applied
        self._applied = chip.remove()
        logger.info("Filter removed", field=field.value, applied=self._applied.to_dict())
        return self._applied
