"""Upvote aggregate: one anonymous session's vote on one review.

The identity is derived from the (review, session) pair, so the store
holds at most one row per pair no matter how many times it is written.
Session ids are generated and kept by the client; nothing stops a client
from minting a new one and voting again.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from reputation.domain import reputation
from reputation.upvote.events import UpvoteRecorded


def upvote_key(review_id, session_id):
    return f"{review_id}:{session_id}"


@reputation.aggregate
class Upvote:
    upvote_key = Identifier(identifier=True, required=True)
    review_id = Identifier(required=True)
    session_id = String(required=True, max_length=255)
    voted_at = DateTime()

    @classmethod
    def cast(cls, review_id, session_id):
        now = datetime.now(UTC)

        upvote = cls(
            upvote_key=upvote_key(review_id, session_id),
            review_id=review_id,
            session_id=session_id,
            voted_at=now,
        )

        upvote.raise_(
            UpvoteRecorded(
                review_id=str(review_id),
                session_id=session_id,
                voted_at=now,
            )
        )

        return upvote
