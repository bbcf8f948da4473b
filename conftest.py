"""
Common test fixtures for the portal API tests.

Provides an admin, two interns and API clients authenticated as each of
them, plus a helper that logs in through the JWT endpoint.
"""
import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIClient

from users.models import UserProfile


class FlakyStorage:
    """Stand-in storage that fails on a chosen save call."""

    def __init__(self, fail_on):
        self.fail_on = fail_on
        self.saved = []
        self.deleted = []

    def save(self, name, content):
        if len(self.saved) + 1 == self.fail_on:
            raise OSError("bucket unavailable")
        self.saved.append(name)
        return name

    def url(self, name):
        return f"https://cdn.example/{name}"

    def delete(self, name):
        self.deleted.append(name)


def make_intern(email, name, branch="CSE", year="E3", password="pass12345"):
    user = User.objects.create_user(username=email, email=email, password=password)
    profile = user.profile
    profile.role = UserProfile.ROLE_INTERN
    profile.full_name = name
    profile.branch = branch
    profile.year = year
    profile.save()
    return user


@pytest.fixture
def portal_admin(db):
    """Create a staff user with the admin role."""
    user = User.objects.create_user(
        username="admin@eitp.test", email="admin@eitp.test", password="pass12345", is_staff=True
    )
    user.profile.full_name = "Dr. Admin"
    user.profile.save()
    return user


@pytest.fixture
def intern(db):
    return make_intern("ravi@eitp.test", "Ravi Kumar")


@pytest.fixture
def other_intern(db):
    return make_intern("sita@eitp.test", "Sita Devi", branch="ECE", year="E2")


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_api(portal_admin):
    client = APIClient()
    client.force_authenticate(user=portal_admin)
    return client


@pytest.fixture
def intern_api(intern):
    client = APIClient()
    client.force_authenticate(user=intern)
    return client


@pytest.fixture
def other_intern_api(other_intern):
    client = APIClient()
    client.force_authenticate(user=other_intern)
    return client


@pytest.fixture
def auth_client(client, db, intern):
    """Authenticate the Django test client using JWT tokens."""
    resp = client.post(
        "/api/auth/login/",
        {"email": "ravi@eitp.test", "password": "pass12345"},
        content_type="application/json",
    )
    assert resp.status_code == 200
    token = resp.json()["access"]
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {token}"
    return client


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test from zero."""
    from django.core.cache import cache

    cache.clear()
    yield
