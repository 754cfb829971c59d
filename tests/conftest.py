"""Shared pytest fixtures and configuration."""

import os
import pytest
from freezegun import freeze_time

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")
os.environ.setdefault("ADMIN_EMAIL", "admin@sabiconsults.com")
os.environ.setdefault("ADMIN_PASSWORD", "correct-horse-battery")
os.environ.setdefault("ADMIN_SESSION_SECRET", "test-session-secret")
os.environ.setdefault("LOG_FORMAT", "text")

from tests.utils.factories import create_blog_row, create_listing_row, create_team_row  # noqa: E402
from tests.utils.memory_store import InMemoryCollectionStore  # noqa: E402


@pytest.fixture
def sample_listing_rows():
    """Five listings: three available (two houses, one land), one sold, one pending."""
    return [
        create_listing_row(
            "house", id="house-maitama", title="5 Bedroom Detached Duplex", district="Maitama",
            price=450_000_000, bedrooms=5, latitude=9.08, longitude=7.49, featured=True, days_ago=1,
        ),
        create_listing_row(
            "land", id="land-gwarinpa", title="Residential Plot", district="Gwarinpa",
            price=100_000_000, land_size=650.0, latitude=9.10, longitude=7.39, days_ago=2,
        ),
        create_listing_row(
            "house", id="house-jabi", title="3 Bedroom Terrace", district="Jabi",
            price=250_000_000, bedrooms=3, latitude=9.0736, longitude=7.4237, days_ago=3,
        ),
        create_listing_row(
            "house", id="house-sold", title="Sold Mansion", district="Asokoro",
            price=1_500_000_000, bedrooms=7, status="sold", days_ago=4,
        ),
        create_listing_row(
            "land", id="land-pending", title="Pending Plot", district="Katampe",
            price=80_000_000, status="pending", days_ago=5,
        ),
    ]


@pytest.fixture
def listing_store(sample_listing_rows):
    return InMemoryCollectionStore(sample_listing_rows)


@pytest.fixture
def empty_store():
    return InMemoryCollectionStore()


@pytest.fixture
def blog_store():
    return InMemoryCollectionStore([
        create_blog_row(id="post-new", slug="abuja-market-2025", days_ago=1),
        create_blog_row(id="post-old", slug="buying-land-guide", days_ago=30),
        create_blog_row(id="post-mid", slug="maitama-vs-asokoro", days_ago=10),
        create_blog_row(id="post-oldest", slug="title-documents", days_ago=60),
        create_blog_row(id="post-draft", slug="upcoming-estates", status="draft"),
    ])


@pytest.fixture
def team_rows():
    return [
        create_team_row(id="member-ceo", display_order=1, name="Adaeze Okafor"),
        create_team_row(id="member-ops", display_order=3),
        create_team_row(id="member-sales", display_order=2),
        create_team_row(id="member-former", display_order=0, is_active=False),
    ]


@pytest.fixture
def team_store(team_rows):
    return InMemoryCollectionStore(team_rows)


@pytest.fixture
def settings_store():
    return InMemoryCollectionStore(id_column="key", generate_ids=False)


@pytest.fixture
def admin_headers():
    """Bearer headers carrying a freshly issued admin session token."""
    from sabi.services.admin_auth import issue_session_token

    return {"Authorization": f"Bearer {issue_session_token()}", "content-type": "application/json"}


@pytest.fixture
def admin_context():
    return {"headers": {}, "user": "admin"}


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time
