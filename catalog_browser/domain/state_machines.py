"""State machine for the filter editor.

The editor is either closed or editing a draft. The state is an explicit
tagged variant (``Closed`` / ``Editing``) so a draft only exists while it
is live; ``EditorStatus`` carries the transition table.
"""

from dataclasses import dataclass
from enum import Enum

from catalog_browser.domain.exceptions import InvalidStateTransitionError
from catalog_browser.domain.value_objects import FilterCriteria


class EditorStatus(str, Enum):
    """Filter editor lifecycle states.

    State diagram:
        CLOSED ──── open ────► EDITING ──┐
          ▲                     │   ▲    │ open (re-seed)
          │ commit / cancel     │   └────┘
          └─────────────────────┘
        clear_all forces CLOSED from either state without validation.
    """

    CLOSED = "closed"
    EDITING = "editing"

    def can_transition_to(self, target: "EditorStatus") -> bool:
        """Check if transition to target state is valid.

        Args:
            target: Target state to transition to.

        Returns:
            True if transition is valid.
        """
        return target in _EDITOR_TRANSITIONS.get(self, set())

    def allowed_transitions(self) -> list["EditorStatus"]:
        """Get list of valid target states.

        Returns:
            List of states that can be transitioned to.
        """
        return list(_EDITOR_TRANSITIONS.get(self, set()))

    def is_editing(self) -> bool:
        """Check if a draft is live."""
        return self == EditorStatus.EDITING


# Editor state transitions (defined outside enum to avoid Enum restrictions)
_EDITOR_TRANSITIONS: dict[EditorStatus, set[EditorStatus]] = {
    EditorStatus.CLOSED: {EditorStatus.EDITING},
    EditorStatus.EDITING: {EditorStatus.EDITING, EditorStatus.CLOSED},
}


def validate_editor_transition(current: EditorStatus, target: EditorStatus) -> None:
    """Validate an editor state transition.

    Args:
        current: Current state.
        target: Target state.

    Raises:
        InvalidStateTransitionError: If transition is not valid.
    """
    if not current.can_transition_to(target):
        raise InvalidStateTransitionError(
            entity_type="FilterEditor",
            current_state=current.value,
            target_state=target.value,
            allowed_transitions=[s.value for s in current.allowed_transitions()],
        )


# ============================================================================
# Editor States
# ============================================================================


@dataclass(frozen=True)
class Closed:
    """No filter edit in progress."""

    status: EditorStatus = EditorStatus.CLOSED


@dataclass(frozen=True)
class Editing:
    """A filter edit in progress.

    Attributes:
        draft: Criteria being edited; not visible in the list until committed.
    """

    draft: FilterCriteria
    status: EditorStatus = EditorStatus.EDITING


EditorState = Closed | Editing
