"""FastAPI routes for the Reputation bounded context.

Thin adapters: writes translate Pydantic schemas into Protean commands,
reads call the pager, badge and insight projections directly.
"""

from fastapi import APIRouter, HTTPException, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from reputation.api.schemas import (
    BadgeListResponse,
    BadgeResponse,
    InsightsResponse,
    JobIdResponse,
    JobListResponse,
    JobResponse,
    OnboardVendorRequest,
    ReviewPageResponse,
    ReviewResponse,
    ReviewSubmittedResponse,
    SubmitJobRequest,
    SubmitReviewRequest,
    UpvoteRequest,
    UpvoteResponse,
    VendorIdResponse,
    VendorListResponse,
    VendorResponse,
)
from reputation.job.submission import DEFAULT_JOB_LIMIT, SubmitJob, list_jobs
from reputation.review.pager import page_reviews
from reputation.review.sentiment import analyze_reviews
from reputation.review.store import DEFAULT_PAGE_SIZE
from reputation.review.submission import record_review
from reputation.upvote.voting import cast_upvote, count_upvotes
from reputation.vendor.badges import evaluate_badges
from reputation.vendor.directory import search_vendors
from reputation.vendor.onboarding import OnboardVendor
from reputation.vendor.vendor import Vendor

vendor_router = APIRouter(prefix="/vendors", tags=["vendors"])
review_router = APIRouter(prefix="/reviews", tags=["reviews"])


def _vendor_or_404(vendor_id):
    try:
        return current_domain.repository_for(Vendor).get(vendor_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Vendor {vendor_id} not found") from None


def _vendor_response(vendor):
    return VendorResponse(
        vendor_id=str(vendor.id),
        business_name=vendor.business_name,
        service_type=vendor.service_type,
        subscription_tier=vendor.subscription_tier,
        total_jobs=vendor.total_jobs or 0,
        verified_jobs=vendor.verified_jobs or 0,
        avg_rating=vendor.avg_rating or 0.0,
        trust_score=vendor.trust_score or 0,
        trust_level=vendor.trust_level.value,
        verification_percentage=vendor.verification_percentage,
        created_at=vendor.created_at,
    )


# --- Vendor endpoints ---


@vendor_router.post("", status_code=201, response_model=VendorIdResponse)
async def onboard_vendor(body: OnboardVendorRequest) -> VendorIdResponse:
    """Create a vendor profile with zeroed metrics."""
    command = OnboardVendor(
        business_name=body.business_name,
        service_type=body.service_type,
        contact_phone=body.contact_phone,
        subscription_tier=body.subscription_tier,
    )
    vendor_id = current_domain.process(command, asynchronous=False)
    return VendorIdResponse(vendor_id=vendor_id)


@vendor_router.get("", response_model=VendorListResponse)
async def list_vendors(search: str | None = None) -> VendorListResponse:
    """Vendor directory, optionally filtered by business name."""
    return VendorListResponse(vendors=[_vendor_response(vendor) for vendor in search_vendors(search)])


@vendor_router.get("/{vendor_id}", response_model=VendorResponse)
async def get_vendor(vendor_id: str) -> VendorResponse:
    return _vendor_response(_vendor_or_404(vendor_id))


@vendor_router.get("/{vendor_id}/badges", response_model=BadgeListResponse)
async def get_badges(vendor_id: str) -> BadgeListResponse:
    vendor = _vendor_or_404(vendor_id)
    return BadgeListResponse(
        vendor_id=vendor_id,
        badges=[
            BadgeResponse(key=b.key, label=b.label, description=b.description, unlocked=b.unlocked)
            for b in evaluate_badges(vendor)
        ],
    )


@vendor_router.post("/{vendor_id}/reviews", status_code=201, response_model=ReviewSubmittedResponse)
async def submit_review(vendor_id: str, body: SubmitReviewRequest) -> ReviewSubmittedResponse:
    """Record a review; ``score_updated`` is false when rescoring is still pending."""
    try:
        outcome = record_review(
            vendor_id=vendor_id,
            rating=body.rating,
            comment=body.comment,
            author_name=body.author_name,
            anonymous=body.anonymous,
            image_ref=body.image_ref,
            job_id=body.job_id,
        )
    except ObjectNotFoundError:
        detail = f"Vendor {vendor_id} not found"
        if body.job_id:
            detail = f"Vendor {vendor_id} or job {body.job_id} not found"
        raise HTTPException(status_code=404, detail=detail) from None
    return ReviewSubmittedResponse(review_id=outcome.review_id, score_updated=outcome.score_updated)


@vendor_router.get("/{vendor_id}/reviews", response_model=ReviewPageResponse)
async def list_reviews(
    vendor_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
    recency: str = "all",
    session_id: str | None = None,
) -> ReviewPageResponse:
    """A page of reviews, newest first, with upvote counts for the page."""
    try:
        page = page_reviews(vendor_id, page_size=page_size, offset=offset, recency=recency)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Vendor {vendor_id} not found") from None

    tally = count_upvotes([review.id for review in page.reviews], session_id=session_id)
    return ReviewPageResponse(
        reviews=[
            ReviewResponse(
                review_id=str(review.id),
                rating=review.rating.score,
                comment=review.comment,
                author_label=review.author_label,
                image_ref=review.image_ref,
                created_at=review.created_at,
                upvotes=tally.counts.get(str(review.id), 0),
                upvoted=tally.voted.get(str(review.id), False),
            )
            for review in page.reviews
        ],
        has_more=page.has_more,
        next_offset=page.next_offset,
    )


@vendor_router.get("/{vendor_id}/insights", response_model=InsightsResponse)
async def get_insights(
    vendor_id: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    offset: int = 0,
    recency: str = "all",
) -> InsightsResponse:
    """Most mentioned positive and negative keywords across a page of reviews."""
    try:
        page = page_reviews(vendor_id, page_size=page_size, offset=offset, recency=recency)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Vendor {vendor_id} not found") from None

    summary = analyze_reviews(page.reviews)
    return InsightsResponse(
        positives=summary.positives,
        negatives=summary.negatives,
        has_signals=summary.has_signals,
    )


@vendor_router.post("/{vendor_id}/jobs", status_code=201, response_model=JobIdResponse)
async def submit_job(vendor_id: str, body: SubmitJobRequest) -> JobIdResponse:
    """Log a job the vendor carried out; it starts out pending."""
    command = SubmitJob(
        vendor_id=vendor_id,
        job_number=body.job_number,
        client_name=body.client_name,
        client_contact=body.client_contact,
        service_type=body.service_type,
        description=body.description,
    )
    try:
        job_id = current_domain.process(command, asynchronous=False)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Vendor {vendor_id} not found") from None
    return JobIdResponse(job_id=job_id)


@vendor_router.get("/{vendor_id}/jobs", response_model=JobListResponse)
async def get_jobs(vendor_id: str, limit: int = DEFAULT_JOB_LIMIT) -> JobListResponse:
    try:
        jobs = list_jobs(vendor_id, limit=limit)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Vendor {vendor_id} not found") from None
    return JobListResponse(
        jobs=[
            JobResponse(
                job_id=str(job.id),
                job_number=job.job_number,
                client_name=job.client_name,
                service_type=job.service_type,
                status=job.status,
                created_at=job.created_at,
                verified_at=job.verified_at,
            )
            for job in jobs
        ]
    )


# --- Review endpoints ---


@review_router.post("/{review_id}/upvotes", status_code=201, response_model=UpvoteResponse)
async def upvote_review(review_id: str, body: UpvoteRequest, response: Response) -> UpvoteResponse:
    """Upvote a review once per session; repeats answer 200 with ``already_voted``."""
    try:
        outcome = cast_upvote(review_id, body.session_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail=f"Review {review_id} not found") from None

    if outcome.already_voted:
        response.status_code = 200
    return UpvoteResponse(review_id=review_id, recorded=outcome.recorded, already_voted=outcome.already_voted)
