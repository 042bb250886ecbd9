"""Review aggregate: a customer's rating and comment for a vendor.

Reviews are write-once: there is no edit, moderation, or removal path.
The vendor's derived metrics are recomputed from the full set of reviews
after every successful submission.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text, ValueObject

from reputation.domain import reputation
from reputation.review.events import ReviewSubmitted

ANONYMOUS_LABEL = "Anonymous"
DEFAULT_AUTHOR_LABEL = "Customer"


@reputation.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < 1 or self.score > 5):
            raise ValidationError({"score": ["Rating must be between 1 and 5"]})


def author_label_for(author_name=None, anonymous=False):
    """Display label for a reviewer; never a verified customer identity."""
    if anonymous:
        return ANONYMOUS_LABEL
    name = (author_name or "").strip()
    return name or DEFAULT_AUTHOR_LABEL


@reputation.aggregate
class Review:
    vendor_id = Identifier(required=True)
    rating = ValueObject(Rating, required=True)
    comment = Text()
    author_label = String(required=True, max_length=100)
    image_ref = String(max_length=500)
    job_id = Identifier()
    created_at = DateTime()

    @invariant.post
    def author_label_must_not_be_blank(self):
        if self.author_label is not None and len(self.author_label.strip()) == 0:
            raise ValidationError({"author_label": ["Author label cannot be empty"]})

    @classmethod
    def submit(
        cls,
        vendor_id,
        rating,
        comment=None,
        author_name=None,
        anonymous=False,
        image_ref=None,
        job_id=None,
        submitted_at=None,
    ):
        """Record a new review. ``submitted_at`` is only for backfills; it defaults to now."""
        now = submitted_at or datetime.now(UTC)
        comment = comment.strip() if comment else None

        review = cls(
            vendor_id=vendor_id,
            rating=Rating(score=rating),
            comment=comment or None,
            author_label=author_label_for(author_name, anonymous),
            image_ref=image_ref,
            job_id=job_id,
            created_at=now,
        )

        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                vendor_id=str(vendor_id),
                rating=rating,
                comment=review.comment,
                author_label=review.author_label,
                has_image=str(bool(image_ref)),
                submitted_at=now,
            )
        )

        return review
