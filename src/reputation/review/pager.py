"""Review pager: newest-first review listings with a recency window.

Offset paging is enough here: a vendor has hundreds of reviews, not
millions. ``has_more`` is true whenever a page comes back full, so a
listing whose length is an exact multiple of the page size costs one extra
empty "load more" request before it flips to false.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from enum import Enum

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from reputation.review.store import DEFAULT_PAGE_SIZE, list_reviews
from reputation.vendor.vendor import Vendor


class RecencyFilter(Enum):
    ALL = "all"
    LAST_WEEK = "lastWeek"
    LAST_MONTH = "lastMonth"

    @property
    def window(self):
        return _WINDOWS.get(self)

    def since(self, now):
        """Lower bound on ``created_at``, or None when unbounded."""
        window = self.window
        return now - window if window is not None else None


_WINDOWS = {
    RecencyFilter.LAST_WEEK: timedelta(days=7),
    RecencyFilter.LAST_MONTH: timedelta(days=30),
}


@dataclass(frozen=True)
class ReviewPage:
    reviews: list = field(default_factory=list)
    has_more: bool = False
    next_offset: int = 0


def _as_recency(recency):
    if isinstance(recency, RecencyFilter):
        return recency
    try:
        return RecencyFilter(recency or RecencyFilter.ALL.value)
    except ValueError:
        choices = ", ".join(f.value for f in RecencyFilter)
        raise ValidationError({"recency": [f"Recency must be one of: {choices}"]}) from None


def page_reviews(vendor_id, page_size=DEFAULT_PAGE_SIZE, offset=0, recency=RecencyFilter.ALL, now=None):
    if not vendor_id:
        raise ValidationError({"vendor_id": ["Vendor is required"]})
    if page_size is None or page_size < 1:
        raise ValidationError({"page_size": ["Page size must be at least 1"]})
    if offset is None or offset < 0:
        raise ValidationError({"offset": ["Offset cannot be negative"]})

    recency = _as_recency(recency)
    current_domain.repository_for(Vendor).get(vendor_id)

    since = recency.since(now or datetime.now(UTC))
    reviews = list_reviews(vendor_id, since=since, offset=offset, limit=page_size)

    return ReviewPage(
        reviews=reviews,
        has_more=len(reviews) == page_size,
        next_offset=offset + len(reviews),
    )
