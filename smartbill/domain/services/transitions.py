"""Legal state transitions for user status and gender.

Tables are read-only mappings built once at import. Lookups are pure
functions of ``(table, current, requested)`` so they can be checked in
isolation from any entity.
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, TypeVar

from smartbill.domain.enums import Gender, UserStatus

E = TypeVar("E", bound=Enum)

STATUS_TRANSITIONS: Mapping[UserStatus, frozenset[UserStatus]] = MappingProxyType(
    {
        UserStatus.PENDING: frozenset({UserStatus.ACTIVE, UserStatus.DELETED}),
        UserStatus.ACTIVE: frozenset({UserStatus.SUSPENDED, UserStatus.DELETED}),
        UserStatus.SUSPENDED: frozenset({UserStatus.ACTIVE, UserStatus.DELETED}),
        UserStatus.DELETED: frozenset(),
    }
)

GENDER_TRANSITIONS: Mapping[Gender, frozenset[Gender]] = MappingProxyType(
    {
        Gender.MALE: frozenset({Gender.FEMALE}),
        Gender.FEMALE: frozenset({Gender.MALE}),
    }
)


def allowed_transitions(table: Mapping[E, frozenset[E]], current: Optional[E]) -> frozenset[E]:
    """Successor states of ``current``; unknown states have none."""
    return table.get(current, frozenset())


def is_transition_allowed(
    table: Mapping[E, frozenset[E]], current: Optional[E], requested: Optional[E]
) -> bool:
    """
    Check whether moving from ``current`` to ``requested`` is legal.

    Staying in the same state is always legal (it is a no-op). ``None`` is
    never a legal target.
    """
    if requested is None:
        return False
    if requested == current:
        return True
    return requested in allowed_transitions(table, current)


def describe_allowed(states: Iterable[E]) -> str:
    """Render a set of states as ``[A, B]`` in declaration order, or ``none``."""
    states = list(states)
    if not states:
        return "none"
    order = list(type(states[0]))
    return "[" + ", ".join(s.name for s in sorted(states, key=order.index)) + "]"
