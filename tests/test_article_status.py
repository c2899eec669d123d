"""文章状态机测试"""

import itertools

import pytest

from editorial_workflow.domain.value_objects import (
    TRANSITIONS,
    ArticleAction,
    ArticleStatus,
    allowed_sources,
    can_transition,
    next_status,
)
from editorial_workflow.shared.exceptions import ErrorKind, InvalidTransitionError, InvalidValueError

S = ArticleStatus

EXPECTED = {
    ArticleAction.SUBMIT: ({S.DRAFT, S.REJECTED}, S.PENDING_REVIEW),
    ArticleAction.APPROVE: ({S.PENDING_REVIEW}, S.APPROVED),
    ArticleAction.REJECT: ({S.PENDING_REVIEW}, S.REJECTED),
    ArticleAction.PUBLISH: ({S.APPROVED}, S.PUBLISHED),
    ArticleAction.ARCHIVE: (set(S) - {S.ARCHIVED}, S.ARCHIVED),
}


def test_table_covers_every_action() -> None:
    assert set(TRANSITIONS) == set(ArticleAction)
    for action, (sources, target) in EXPECTED.items():
        assert allowed_sources(action) == frozenset(sources)
        assert TRANSITIONS[action].target is target


@pytest.mark.parametrize(("status", "action"), list(itertools.product(ArticleStatus, ArticleAction)))
def test_every_status_action_pair(status: ArticleStatus, action: ArticleAction) -> None:
    sources, target = EXPECTED[action]

    if status in sources:
        assert can_transition(status, action)
        assert next_status(status, action) is target
    else:
        assert not can_transition(status, action)
        with pytest.raises(InvalidTransitionError) as exc_info:
            next_status(status, action)

        err = exc_info.value
        assert err.current_status == status.value
        assert err.action == action.value
        assert err.allowed_statuses == sorted(s.value for s in sources)
        assert err.kind is ErrorKind.INVALID_TRANSITION


@pytest.mark.parametrize("status", list(ArticleStatus))
def test_predicates_follow_table(status: ArticleStatus) -> None:
    assert status.can_be_submitted_for_review() == (status in {S.DRAFT, S.REJECTED})
    assert status.can_be_reviewed() == (status is S.PENDING_REVIEW)
    assert status.can_be_published() == (status is S.APPROVED)


def test_published_and_archived_accept_nothing_but_archive() -> None:
    for status in (S.PUBLISHED, S.ARCHIVED):
        assert not status.can_be_submitted_for_review()
        assert not status.can_be_reviewed()
        assert not status.can_be_published()

    assert can_transition(S.PUBLISHED, ArticleAction.ARCHIVE)
    assert not can_transition(S.ARCHIVED, ArticleAction.ARCHIVE)


def test_from_string() -> None:
    assert ArticleStatus.from_string("pending_review") is S.PENDING_REVIEW
    assert str(S.PENDING_REVIEW) == "pending_review"

    with pytest.raises(InvalidValueError, match="未知的文章状态"):
        ArticleStatus.from_string("deleted")
