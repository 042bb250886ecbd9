"""Errors raised by the Reputation context beyond Protean's own exceptions."""


class TransientStoreError(Exception):
    """A store read or write failed for a reason that may clear on retry.

    Raised by the vendor metrics recomputation when the review population
    cannot be read; the prior vendor aggregate is left untouched.
    """
