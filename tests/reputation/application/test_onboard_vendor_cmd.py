"""Application tests for OnboardVendor command handler."""

from protean import current_domain
from reputation.vendor.onboarding import OnboardVendor
from reputation.vendor.vendor import Vendor


def _onboard(**overrides):
    defaults = {"business_name": "Sparkle Cleaning", "service_type": "Cleaning"}
    defaults.update(overrides)
    return current_domain.process(OnboardVendor(**defaults), asynchronous=False)


class TestOnboardVendorCommand:
    def test_persists_vendor(self):
        vendor_id = _onboard()
        vendor = current_domain.repository_for(Vendor).get(vendor_id)
        assert vendor.business_name == "Sparkle Cleaning"
        assert vendor.service_type == "Cleaning"

    def test_metrics_start_at_zero(self):
        vendor = current_domain.repository_for(Vendor).get(_onboard())
        assert (vendor.total_jobs, vendor.verified_jobs, vendor.avg_rating, vendor.trust_score) == (0, 0, 0.0, 0)

    def test_returns_string_id(self):
        assert isinstance(_onboard(), str)

    def test_defaults_applied(self):
        vendor_id = current_domain.process(OnboardVendor(), asynchronous=False)
        vendor = current_domain.repository_for(Vendor).get(vendor_id)
        assert vendor.business_name == "My Business"
        assert vendor.subscription_tier == "Free"
