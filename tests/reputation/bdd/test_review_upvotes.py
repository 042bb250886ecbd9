"""BDD tests for review upvotes."""

import pytest
from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from reputation.upvote.voting import UpvoteReview, count_upvotes

scenarios("features/review_upvotes.feature")


@pytest.fixture()
def last_vote():
    return {"outcome": None}


@when(parsers.cfparse('session "{session_id}" upvotes the review'))
def upvote(review_id, session_id, last_vote):
    last_vote["outcome"] = current_domain.process(
        UpvoteReview(review_id=review_id, session_id=session_id),
        asynchronous=False,
    )


@then("the upvote is recorded")
def upvote_recorded(last_vote):
    assert last_vote["outcome"].recorded is True


@then("the session is told it already voted")
def already_voted(last_vote):
    assert last_vote["outcome"].already_voted is True


@then(parsers.cfparse("the review has {count:d} upvotes"))
def review_upvotes(review_id, count):
    assert count_upvotes([review_id]).counts[review_id] == count


@then(parsers.cfparse('session "{session_id}" has upvoted the review'))
def session_voted(review_id, session_id):
    assert count_upvotes([review_id], session_id=session_id).voted[review_id] is True


@then(parsers.cfparse('session "{session_id}" has not upvoted the review'))
def session_not_voted(review_id, session_id):
    assert count_upvotes([review_id], session_id=session_id).voted[review_id] is False
