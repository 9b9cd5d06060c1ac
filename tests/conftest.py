"""
Pytest configuration and fixtures.
"""
import pytest

from apps.accounts.domain.entities.role import Role
from .fakes import InMemoryCategoryRepository, InMemoryRoleRepository, make_category


@pytest.fixture
def category_tree_records():
    """X -> {Y, Z}, Y -> {W}, plus an unrelated sibling S."""
    return [
        make_category('X', position=1),
        make_category('Y', parent_id='X', position=1),
        make_category('Z', parent_id='X', position=2),
        make_category('W', parent_id='Y', position=1),
        make_category('S', position=2),
    ]


@pytest.fixture
def category_repository(category_tree_records):
    return InMemoryCategoryRepository(category_tree_records)


@pytest.fixture
def role_repository():
    return InMemoryRoleRepository([
        Role(id='r1', name='Admin', permissions=['products-category_view']),
        Role(id='r2', name='Editor', permissions=[]),
    ])


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, admin_user):
    """Create an API client authenticated as a staff user."""
    api_client.force_authenticate(user=admin_user)
    return api_client
