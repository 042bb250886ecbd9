"""Review store accessor: reads and writes of Review records.

Every function here is a round-trip to the configured provider. Callers
must not assume two calls observe the same state.
"""

from protean.utils.globals import current_domain

from reputation.review.review import Review
from reputation.utils.query import fetch_all

DEFAULT_PAGE_SIZE = 6


def _reviews_for(vendor_id):
    return current_domain.repository_for(Review)._dao.query.filter(vendor_id=str(vendor_id))


def insert_review(review):
    current_domain.repository_for(Review).add(review)
    return str(review.id)


def list_reviews(vendor_id, since=None, offset=0, limit=DEFAULT_PAGE_SIZE):
    """One page of a vendor's reviews, newest first."""
    query = _reviews_for(vendor_id)
    if since is not None:
        query = query.filter(created_at__gte=since)
    return query.order_by(["-created_at", "id"]).offset(offset).limit(limit).all().items


def vendor_ratings(vendor_id):
    """Every rating the vendor has received, in no particular order."""
    reviews = fetch_all(_reviews_for(vendor_id).order_by("id"))
    return [review.rating.score for review in reviews]
