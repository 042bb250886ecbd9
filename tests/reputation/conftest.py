import os

import pytest


@pytest.fixture(scope="session")
def _reputation_domain(request):
    """Initialize the reputation domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from reputation.domain import reputation

    reputation.init()
    return reputation


@pytest.fixture(scope="session", autouse=True)
def setup_db(_reputation_domain):
    from reputation.utils.db import drop_db, setup_db

    setup_db(_reputation_domain)

    yield

    drop_db(_reputation_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_reputation_domain):
    """Push domain context before each test, cleanup after."""
    with _reputation_domain.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()
