"""Shared BDD fixtures and step definitions for the Reputation domain."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from reputation.review.review import Review
from reputation.review.store import insert_review
from reputation.vendor.onboarding import OnboardVendor


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a newly onboarded vendor", target_fixture="vendor_id")
def onboarded_vendor():
    return current_domain.process(OnboardVendor(business_name="BDD Builders"), asynchronous=False)


@given("a vendor with one review", target_fixture="review_id")
def vendor_with_one_review():
    vendor_id = current_domain.process(OnboardVendor(business_name="BDD Builders"), asynchronous=False)
    return insert_review(Review.submit(vendor_id=vendor_id, rating=5, comment="Great job"))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the submission fails with "{message}"'))
def submission_fails(error, message):
    assert error["exc"] is not None
    assert isinstance(error["exc"], ValidationError)
    assert message in str(error["exc"].messages)
