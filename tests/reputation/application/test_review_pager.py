"""Application tests for newest-first review paging with recency windows."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from reputation.review.pager import RecencyFilter, page_reviews
from reputation.review.review import Review
from reputation.review.store import insert_review
from reputation.vendor.onboarding import OnboardVendor

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


@pytest.fixture()
def vendor_id():
    return current_domain.process(OnboardVendor(business_name="Quick Plumbing"), asynchronous=False)


def _review_at(vendor_id, days_ago, rating=4, comment=None):
    return insert_review(
        Review.submit(
            vendor_id=vendor_id,
            rating=rating,
            comment=comment,
            submitted_at=NOW - timedelta(days=days_ago),
        )
    )


class TestRecencyFilter:
    def test_windows(self):
        assert RecencyFilter.ALL.since(NOW) is None
        assert RecencyFilter.LAST_WEEK.since(NOW) == NOW - timedelta(days=7)
        assert RecencyFilter.LAST_MONTH.since(NOW) == NOW - timedelta(days=30)

    def test_wire_values(self):
        assert RecencyFilter("lastWeek") is RecencyFilter.LAST_WEEK
        assert RecencyFilter("lastMonth") is RecencyFilter.LAST_MONTH


class TestPageReviews:
    def test_newest_first(self, vendor_id):
        oldest = _review_at(vendor_id, 3)
        newest = _review_at(vendor_id, 1)
        middle = _review_at(vendor_id, 2)

        page = page_reviews(vendor_id, now=NOW)

        assert [str(review.id) for review in page.reviews] == [newest, middle, oldest]
        assert page.has_more is False
        assert page.next_offset == 3

    def test_empty_vendor(self, vendor_id):
        page = page_reviews(vendor_id, now=NOW)
        assert page.reviews == []
        assert page.has_more is False
        assert page.next_offset == 0

    def test_full_page_reports_more(self, vendor_id):
        for days_ago in range(6):
            _review_at(vendor_id, days_ago)

        first = page_reviews(vendor_id, page_size=6, now=NOW)
        assert len(first.reviews) == 6
        assert first.has_more is True

        second = page_reviews(vendor_id, page_size=6, offset=first.next_offset, now=NOW)
        assert second.reviews == []
        assert second.has_more is False

    def test_pages_do_not_overlap(self, vendor_id):
        for days_ago in range(10):
            _review_at(vendor_id, days_ago)

        first = page_reviews(vendor_id, page_size=6, now=NOW)
        second = page_reviews(vendor_id, page_size=6, offset=first.next_offset, now=NOW)

        assert len(first.reviews) == 6
        assert len(second.reviews) == 4
        assert second.has_more is False
        seen = {str(r.id) for r in first.reviews} | {str(r.id) for r in second.reviews}
        assert len(seen) == 10

    def test_last_week(self, vendor_id):
        recent = _review_at(vendor_id, 2)
        _review_at(vendor_id, 10)

        page = page_reviews(vendor_id, recency="lastWeek", now=NOW)

        assert [str(review.id) for review in page.reviews] == [recent]

    def test_last_month(self, vendor_id):
        week_old = _review_at(vendor_id, 8)
        _review_at(vendor_id, 45)

        page = page_reviews(vendor_id, recency=RecencyFilter.LAST_MONTH, now=NOW)

        assert [str(review.id) for review in page.reviews] == [week_old]

    def test_other_vendors_excluded(self, vendor_id):
        other = current_domain.process(OnboardVendor(business_name="Other Co"), asynchronous=False)
        mine = _review_at(vendor_id, 1)
        _review_at(other, 1)

        page = page_reviews(vendor_id, now=NOW)

        assert [str(review.id) for review in page.reviews] == [mine]

    def test_unknown_vendor(self):
        with pytest.raises(ObjectNotFoundError):
            page_reviews("no-such-vendor", now=NOW)

    def test_invalid_recency(self, vendor_id):
        with pytest.raises(ValidationError) as exc:
            page_reviews(vendor_id, recency="lastYear")
        assert "recency" in exc.value.messages

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_invalid_page_size(self, vendor_id, page_size):
        with pytest.raises(ValidationError) as exc:
            page_reviews(vendor_id, page_size=page_size)
        assert exc.value.messages["page_size"] == ["Page size must be at least 1"]

    def test_negative_offset(self, vendor_id):
        with pytest.raises(ValidationError) as exc:
            page_reviews(vendor_id, offset=-1)
        assert exc.value.messages["offset"] == ["Offset cannot be negative"]

    def test_missing_vendor_id(self):
        with pytest.raises(ValidationError):
            page_reviews("")

    def test_equal_timestamps_page_without_repeats(self, vendor_id):
        ids = {_review_at(vendor_id, 1) for _ in range(7)}

        seen = []
        offset = 0
        while True:
            page = page_reviews(vendor_id, page_size=3, offset=offset, now=NOW)
            seen.extend(str(review.id) for review in page.reviews)
            if not page.has_more:
                break
            offset = page.next_offset

        assert len(seen) == 7
        assert set(seen) == ids
