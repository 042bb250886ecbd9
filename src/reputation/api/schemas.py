"""Pydantic request/response schemas for the Reputation API.

These are separate from Protean commands (anti-corruption pattern).
The API layer is the external contract; commands are internal domain concepts.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class OnboardVendorRequest(BaseModel):
    business_name: str | None = Field(default=None, max_length=200)
    service_type: str | None = Field(default=None, max_length=100)
    contact_phone: str | None = Field(default=None, max_length=50)
    subscription_tier: str | None = None


class SubmitReviewRequest(BaseModel):
    rating: int
    comment: str | None = None
    author_name: str | None = Field(default=None, max_length=100)
    anonymous: bool = False
    image_ref: str | None = Field(default=None, max_length=500)
    job_id: str | None = None


class UpvoteRequest(BaseModel):
    session_id: str = Field(min_length=1, max_length=255)


class SubmitJobRequest(BaseModel):
    job_number: str = Field(min_length=1, max_length=100)
    client_name: str = Field(min_length=1, max_length=200)
    client_contact: str | None = Field(default=None, max_length=200)
    service_type: str | None = Field(default=None, max_length=100)
    description: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class VendorIdResponse(BaseModel):
    vendor_id: str


class VendorResponse(BaseModel):
    vendor_id: str
    business_name: str
    service_type: str | None = None
    subscription_tier: str | None = None
    total_jobs: int = 0
    verified_jobs: int = 0
    avg_rating: float = 0.0
    trust_score: int = 0
    trust_level: str
    verification_percentage: int = 0
    created_at: datetime | None = None


class VendorListResponse(BaseModel):
    vendors: list[VendorResponse] = []


class BadgeResponse(BaseModel):
    key: str
    label: str
    description: str
    unlocked: bool


class BadgeListResponse(BaseModel):
    vendor_id: str
    badges: list[BadgeResponse] = []


class ReviewSubmittedResponse(BaseModel):
    review_id: str
    score_updated: bool


class ReviewResponse(BaseModel):
    review_id: str
    rating: int
    comment: str | None = None
    author_label: str
    image_ref: str | None = None
    created_at: datetime | None = None
    upvotes: int = 0
    upvoted: bool = False


class ReviewPageResponse(BaseModel):
    reviews: list[ReviewResponse] = []
    has_more: bool = False
    next_offset: int = 0


class InsightsResponse(BaseModel):
    positives: list[str] = []
    negatives: list[str] = []
    has_signals: bool = False


class UpvoteResponse(BaseModel):
    review_id: str
    recorded: bool
    already_voted: bool


class JobIdResponse(BaseModel):
    job_id: str


class JobResponse(BaseModel):
    job_id: str
    job_number: str
    client_name: str
    service_type: str | None = None
    status: str
    created_at: datetime | None = None
    verified_at: datetime | None = None


class JobListResponse(BaseModel):
    jobs: list[JobResponse] = []
