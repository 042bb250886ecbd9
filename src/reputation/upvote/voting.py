"""UpvoteReview: at most one upvote per review per anonymous session.

A repeat vote from the same session is not an error: it is reported back
as ``already_voted`` and nothing is written.
"""

from dataclasses import dataclass, field

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, TransactionError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from reputation.domain import reputation
from reputation.review.review import Review
from reputation.upvote.upvote import Upvote, upvote_key
from reputation.utils.query import fetch_all

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpvoteOutcome:
    recorded: bool

    @property
    def already_voted(self):
        return not self.recorded


@dataclass(frozen=True)
class UpvoteTally:
    counts: dict = field(default_factory=dict)
    voted: dict = field(default_factory=dict)


@reputation.command(part_of="Upvote")
class UpvoteReview:
    review_id = Identifier(required=True)
    session_id = String(required=True, max_length=255)


@reputation.command_handler(part_of=Upvote)
class UpvoteReviewHandler:
    @handle(UpvoteReview)
    def upvote_review(self, command):
        current_domain.repository_for(Review).get(command.review_id)

        if _upvote_exists(command.review_id, command.session_id):
            return _already_voted(command.review_id)

        try:
            current_domain.repository_for(Upvote).add(
                Upvote.cast(review_id=command.review_id, session_id=command.session_id)
            )
        except ValidationError as exc:
            # Another request stored the same pair after our existence read
            if "upvote_key" not in exc.messages:
                raise
            return _already_voted(command.review_id)

        return UpvoteOutcome(recorded=True)


def _upvote_exists(review_id, session_id):
    try:
        current_domain.repository_for(Upvote).get(upvote_key(review_id, session_id))
    except ObjectNotFoundError:
        return False
    return True


def _already_voted(review_id):
    logger.info("Session already upvoted review", review_id=str(review_id))
    return UpvoteOutcome(recorded=False)


def cast_upvote(review_id, session_id):
    """Record a session's upvote on a review, at most once.

    A duplicate that only surfaces when the transaction commits (two
    requests racing past the existence check) is reported as
    ``already_voted`` once the stored pair can be read back.
    """
    command = UpvoteReview(review_id=review_id, session_id=session_id)
    try:
        return current_domain.process(command, asynchronous=False)
    except TransactionError:
        if not _upvote_exists(review_id, session_id):
            raise
        return _already_voted(review_id)


def count_upvotes(review_ids, session_id=None):
    """Vote counts and this session's voted flags for a set of reviews.

    One query over the whole id set. If the store cannot be read the tally
    falls back to zero counts so the listing still renders.
    """
    ids = [str(review_id) for review_id in review_ids or ()]
    counts = dict.fromkeys(ids, 0)
    voted = dict.fromkeys(ids, False)
    if not ids:
        return UpvoteTally(counts=counts, voted=voted)

    try:
        query = current_domain.repository_for(Upvote)._dao.query.filter(review_id__in=ids)
        upvotes = fetch_all(query.order_by("upvote_key"))
    except Exception as exc:
        logger.warning(
            "Upvote counts unavailable, showing zero",
            review_count=len(ids),
            error=str(exc),
        )
        return UpvoteTally(counts=counts, voted=voted)

    for upvote in upvotes:
        review_id = str(upvote.review_id)
        if review_id not in counts:
            continue
        counts[review_id] += 1
        if session_id and upvote.session_id == session_id:
            voted[review_id] = True

    return UpvoteTally(counts=counts, voted=voted)
