"""Domain events for the Upvote aggregate."""

from protean.fields import DateTime, Identifier, String

from reputation.domain import reputation


@reputation.event(part_of="Upvote")
class UpvoteRecorded:
    """An anonymous session upvoted a review for the first time."""

    __version__ = 1

    review_id = Identifier(required=True)
    session_id = String(required=True)
    voted_at = DateTime(required=True)
