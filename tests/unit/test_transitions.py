"""Unit tests for the status and gender transition tables."""

import itertools

import pytest

from smartbill.domain.enums import Gender, UserStatus
from smartbill.domain.services.transitions import (
    GENDER_TRANSITIONS,
    STATUS_TRANSITIONS,
    allowed_transitions,
    describe_allowed,
    is_transition_allowed,
)

pytestmark = pytest.mark.unit

EXPECTED_STATUS = {
    UserStatus.PENDING: {UserStatus.ACTIVE, UserStatus.DELETED},
    UserStatus.ACTIVE: {UserStatus.SUSPENDED, UserStatus.DELETED},
    UserStatus.SUSPENDED: {UserStatus.ACTIVE, UserStatus.DELETED},
    UserStatus.DELETED: set(),
}


def test_status_table_covers_every_status():
    assert set(STATUS_TRANSITIONS) == set(UserStatus)


def test_gender_table_covers_every_gender():
    assert set(GENDER_TRANSITIONS) == set(Gender)


@pytest.mark.parametrize("current, requested", list(itertools.product(UserStatus, UserStatus)))
def test_status_transition_legal_iff_listed_or_same(current, requested):
    """Test every (current, requested) pair against the expected table."""
    expected = requested == current or requested in EXPECTED_STATUS[current]

    assert is_transition_allowed(STATUS_TRANSITIONS, current, requested) is expected


def test_deleted_is_terminal():
    assert allowed_transitions(STATUS_TRANSITIONS, UserStatus.DELETED) == frozenset()
    assert is_transition_allowed(STATUS_TRANSITIONS, UserStatus.DELETED, UserStatus.DELETED)
    for status in UserStatus:
        if status is not UserStatus.DELETED:
            assert not is_transition_allowed(STATUS_TRANSITIONS, UserStatus.DELETED, status)


@pytest.mark.parametrize(
    "current, requested, expected",
    [
        (Gender.MALE, Gender.FEMALE, True),
        (Gender.FEMALE, Gender.MALE, True),
        (Gender.MALE, Gender.MALE, True),
        (Gender.FEMALE, None, False),
    ],
)
def test_gender_transitions(current, requested, expected):
    assert is_transition_allowed(GENDER_TRANSITIONS, current, requested) is expected


def test_unknown_current_state_has_no_successors():
    assert allowed_transitions(GENDER_TRANSITIONS, None) == frozenset()


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        STATUS_TRANSITIONS[UserStatus.DELETED] = frozenset({UserStatus.ACTIVE})


def test_describe_allowed_uses_declaration_order():
    allowed = allowed_transitions(STATUS_TRANSITIONS, UserStatus.PENDING)

    assert describe_allowed(allowed) == "[ACTIVE, DELETED]"


def test_describe_allowed_empty_is_none():
    assert describe_allowed(frozenset()) == "none"
