"""Reputation bounded context: Vendor trust scoring, badges, and review engagement.

Turns the append-only stream of customer reviews into a vendor's derived
aggregate (total jobs, average rating, trust score), deduplicates anonymous
review upvotes, and serves read-time projections (badges, keyword insights,
paginated review listings) over the same data.
"""

import structlog
from protean.domain import Domain

reputation = Domain(name="reputation")

logger = structlog.get_logger(__name__)
