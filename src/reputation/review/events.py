"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from reputation.domain import reputation


@reputation.event(part_of="Review")
class ReviewSubmitted:
    """A customer left a review for a vendor."""

    __version__ = 1

    review_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    author_label = String(required=True)
    has_image = String(required=True)  # "True"/"False"
    submitted_at = DateTime(required=True)
