"""
Approval state machine for property listings.
Transitions are pure functions of (state, event); persistence is handled by the workflow service.
"""

from listings.models.enums import ApprovalStatus
from listings.utils.exceptions import IllegalTransitionError
from typing import Dict, FrozenSet
import enum


class ApprovalEvent(str, enum.Enum):
    """Events that drive the approval workflow."""
    SUBMIT = "submit"
    APPROVE = "approve"
    REJECT = "reject"
    ARCHIVE = "archive"


# Target state reached by each event
EVENT_TARGETS: Dict[ApprovalEvent, ApprovalStatus] = {
    ApprovalEvent.SUBMIT: ApprovalStatus.PENDING_APPROVAL,
    ApprovalEvent.APPROVE: ApprovalStatus.APPROVED,
    ApprovalEvent.REJECT: ApprovalStatus.REJECTED,
    ApprovalEvent.ARCHIVE: ApprovalStatus.ARCHIVED,
}

# States each event may legally be applied from
LEGAL_SOURCES: Dict[ApprovalEvent, FrozenSet[ApprovalStatus]] = {
    ApprovalEvent.SUBMIT: frozenset({ApprovalStatus.DRAFT}),
    ApprovalEvent.APPROVE: frozenset({ApprovalStatus.PENDING_APPROVAL}),
    ApprovalEvent.REJECT: frozenset({ApprovalStatus.PENDING_APPROVAL}),
    ApprovalEvent.ARCHIVE: frozenset({ApprovalStatus.APPROVED}),
}


def initial_state(admin_approved: bool = False) -> ApprovalStatus:
    """State assigned at creation; trusted admin entry skips draft and review."""
    return ApprovalStatus.APPROVED if admin_approved else ApprovalStatus.DRAFT


def target_state(event: ApprovalEvent) -> ApprovalStatus:
    return EVENT_TARGETS[ApprovalEvent(event)]


def is_legal(current: ApprovalStatus, event: ApprovalEvent) -> bool:
    """Check the transition table."""
    return ApprovalStatus(current) in LEGAL_SOURCES[ApprovalEvent(event)]


def apply_transition(current: ApprovalStatus, event: ApprovalEvent, strict: bool = False) -> ApprovalStatus:
    """
    Compute the state after applying an event.

    In lenient mode the event's target is returned whatever the current state is,
    matching the behaviour existing clients rely on. In strict mode only moves in
    the transition table are accepted.

    Args:
        current: Current approval state
        event: Event to apply
        strict: Whether to enforce the transition table

    Returns:
        The new approval state

    Raises:
        IllegalTransitionError: If strict and the move is not in the table
    """
    event = ApprovalEvent(event)
    if strict and not is_legal(current, event):
        raise IllegalTransitionError(ApprovalStatus(current).value, event.value)
    return EVENT_TARGETS[event]
