"""
homefix/service_request/lifecycle.py

Service Request Lifecycle
The rules governing which status a request may occupy and who may move it.
Used by the store's request service and by the remote lifecycle controller,
so both sides reject the same moves.

    pending ──► accepted ──► completed
       │
       └──────► rejected

Only the worker the request is addressed to may move it.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar
from uuid import UUID

from homefix.core.exceptions import IllegalTransitionError, NotAuthorizedError
from homefix.database.enums import RequestStatus

logger = logging.getLogger(__name__)

INITIAL_STATUS = RequestStatus.PENDING
TERMINAL_STATUSES: frozenset[RequestStatus] = frozenset(
    {RequestStatus.REJECTED, RequestStatus.COMPLETED}
)

# Current status -> statuses the owning worker may move it to.
ALLOWED_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.PENDING: frozenset({RequestStatus.ACCEPTED, RequestStatus.REJECTED}),
    RequestStatus.ACCEPTED: frozenset({RequestStatus.COMPLETED}),
    RequestStatus.REJECTED: frozenset(),
    RequestStatus.COMPLETED: frozenset(),
}


class HasStatus(Protocol):
    status: Any


R = TypeVar("R", bound=HasStatus)


def can_transition(current: RequestStatus, target: RequestStatus) -> bool:
    """True if `target` is directly reachable from `current`."""
    return target in ALLOWED_TRANSITIONS[RequestStatus(current)]


def is_terminal(status: RequestStatus) -> bool:
    return RequestStatus(status) in TERMINAL_STATUSES


def predecessors_of(target: RequestStatus) -> frozenset[RequestStatus]:
    """Statuses from which `target` may be reached."""
    return frozenset(
        current for current, targets in ALLOWED_TRANSITIONS.items() if target in targets
    )


def ensure_owner(worker_id: UUID, actor_id: UUID) -> None:
    """Raises NotAuthorizedError unless the actor is the request's worker."""
    if worker_id != actor_id:
        logger.warning(f"[LIFECYCLE] Actor {actor_id} is not the owning worker {worker_id}")
        raise NotAuthorizedError("Only the worker assigned to this request can change its status.")


def ensure_transition(current: RequestStatus, target: RequestStatus) -> None:
    """Raises IllegalTransitionError unless `current -> target` is in the table."""
    current = RequestStatus(current)
    target = RequestStatus(target)
    if can_transition(current, target):
        return
    if is_terminal(current):
        message = f"Request is already {current.value}; it cannot move to {target.value}."
    else:
        message = f"Cannot move a {current.value} request to {target.value}."
    logger.warning(f"[LIFECYCLE] Rejected transition {current.value} -> {target.value}")
    raise IllegalTransitionError(message)


def check_transition(
    *, worker_id: UUID, actor_id: UUID, current: RequestStatus, target: RequestStatus
) -> None:
    """Full guard for a status change: ownership first, then the state table."""
    ensure_owner(worker_id, actor_id)
    ensure_transition(current, target)


# ---------------------------------------------------
# Partitioning for dashboard tabs
# ---------------------------------------------------
@dataclass
class RequestBuckets:
    """Requests grouped for the pending / accepted / completed tabs."""

    pending: list[Any] = field(default_factory=list)
    accepted: list[Any] = field(default_factory=list)
    completed: list[Any] = field(default_factory=list)


def partition(requests: Iterable[R]) -> RequestBuckets:
    """
    Groups requests by status, keeping input order within each bucket.

    Rejected requests land in no bucket; the dashboards never show them.
    """
    buckets = RequestBuckets()
    for request in requests:
        status = RequestStatus(request.status)
        if status is RequestStatus.PENDING:
            buckets.pending.append(request)
        elif status is RequestStatus.ACCEPTED:
            buckets.accepted.append(request)
        elif status is RequestStatus.COMPLETED:
            buckets.completed.append(request)
    return buckets
