"""SubmitReview: record a customer review, then rescore the vendor.

The review insert and the vendor recomputation are two separate units of
work. A failed recomputation never un-records the review: the caller is
told the score update is pending, and the next submission recomputes from
scratch anyway.
"""

from dataclasses import dataclass

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from reputation.domain import reputation
from reputation.exceptions import TransientStoreError
from reputation.job.job import Job
from reputation.review.review import Review
from reputation.review.store import insert_review
from reputation.vendor.scoring import RecomputeVendorMetrics, VendorMetrics
from reputation.vendor.vendor import Vendor

logger = structlog.get_logger(__name__)


@reputation.command(part_of="Review")
class SubmitReview:
    vendor_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = Text()
    author_name = String(max_length=100)
    anonymous = Boolean(default=False)
    image_ref = String(max_length=500)
    job_id = Identifier()


@reputation.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        # Reviews are only accepted for vendors that were onboarded
        current_domain.repository_for(Vendor).get(command.vendor_id)
        if command.job_id:
            job = current_domain.repository_for(Job).get(command.job_id)
            if str(job.vendor_id) != str(command.vendor_id):
                raise ValidationError({"job_id": ["Job belongs to a different vendor"]})

        review = Review.submit(
            vendor_id=command.vendor_id,
            rating=command.rating,
            comment=command.comment,
            author_name=command.author_name,
            anonymous=command.anonymous,
            image_ref=command.image_ref,
            job_id=command.job_id,
        )
        return insert_review(review)


@dataclass(frozen=True)
class SubmissionOutcome:
    review_id: str
    score_updated: bool
    metrics: VendorMetrics | None = None


def record_review(
    vendor_id,
    rating,
    comment=None,
    author_name=None,
    anonymous=False,
    image_ref=None,
    job_id=None,
):
    """Submit a review and trigger the vendor's metrics recomputation.

    Validation and missing-vendor errors from the submission propagate.
    Any failure of the recomputation is logged and reported through
    ``score_updated=False``; the previous metrics stay in place.
    """
    review_id = current_domain.process(
        SubmitReview(
            vendor_id=vendor_id,
            rating=rating,
            comment=comment,
            author_name=author_name,
            anonymous=anonymous,
            image_ref=image_ref,
            job_id=job_id,
        ),
        asynchronous=False,
    )

    try:
        metrics = current_domain.process(
            RecomputeVendorMetrics(vendor_id=vendor_id),
            asynchronous=False,
        )
    except Exception as exc:
        # Read failures arrive as TransientStoreError; write failures surface from the commit
        logger.warning(
            "Review saved, score update pending",
            vendor_id=str(vendor_id),
            review_id=review_id,
            transient=isinstance(exc, TransientStoreError),
            error=str(exc),
        )
        return SubmissionOutcome(review_id=review_id, score_updated=False)

    return SubmissionOutcome(review_id=review_id, score_updated=True, metrics=metrics)
