"""
Tests for the Django ORM repositories.
"""
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.accounts.domain.entities.role import Role
from apps.accounts.infrastructure.repositories import DjangoRoleRepository
from apps.catalog.application.use_cases import DeleteCategoryUseCase
from apps.catalog.domain.entities.category import Category
from apps.catalog.domain.value_objects.category_status import CategoryStatus
from apps.catalog.infrastructure.models import ArticleCategoryModel, ProductCategoryModel
from apps.catalog.infrastructure.repositories import DjangoCategoryRepository
from shared.domain.exceptions import StoreError

pytestmark = pytest.mark.django_db


@pytest.fixture
def repository():
    return DjangoCategoryRepository(ProductCategoryModel)


@pytest.fixture
def stored_tree(repository):
    """root -> {child -> {grandchild}}, plus other."""
    root = repository.save(Category.create(title='Root', position=1))
    child = repository.save(Category.create(title='Child', position=1, parent_id=root.id))
    grandchild = repository.save(Category.create(title='Grandchild', position=1, parent_id=child.id))
    other = repository.save(Category.create(title='Other', position=2))
    return root, child, grandchild, other


class TestDjangoCategoryRepository:

    def test_save_and_find_by_id(self, repository):
        saved = repository.save(Category.create(title='Phones', position=3, description='Mobile'))

        found = repository.find_by_id(saved.id)

        assert found.title == 'Phones'
        assert found.position == 3
        assert found.status == CategoryStatus.ACTIVE
        assert found.deleted is False
        assert found.parent_id == ''

    def test_find_by_id_missing(self, repository):
        assert repository.find_by_id('nope') is None

    def test_find_by_parent(self, repository, stored_tree):
        root, child, grandchild, other = stored_tree

        assert [c.id for c in repository.find_by_parent(root.id)] == [child.id]
        assert [c.id for c in repository.find_by_parent('')] == [root.id, other.id]

    def test_find_all_filters_deleted(self, repository, stored_tree):
        root, child, grandchild, other = stored_tree
        repository.update_fields(other.id, {'deleted': True})

        live = {c.id for c in repository.find_all(deleted=False)}
        everything = {c.id for c in repository.find_all()}

        assert other.id not in live
        assert other.id in everything
        assert repository.count() == 4

    def test_update_fields(self, repository, stored_tree):
        root = stored_tree[0]

        assert repository.update_fields(root.id, {'status': CategoryStatus.INACTIVE}) is True
        assert repository.find_by_id(root.id).status == CategoryStatus.INACTIVE

    def test_update_fields_missing_row(self, repository):
        assert repository.update_fields('nope', {'deleted': True}) is False

    def test_update_fields_rejects_unknown_field(self, repository, stored_tree):
        with pytest.raises(ValueError):
            repository.update_fields(stored_tree[0].id, {'id': 'other'})

    def test_update_many_by_id(self, repository, stored_tree):
        root, child, grandchild, other = stored_tree

        updated = repository.update_many_by_id([root.id, other.id, 'nope'], {'status': 'inactive'})

        assert updated == 2
        assert repository.find_by_id(child.id).status == CategoryStatus.ACTIVE

    def test_database_error_becomes_store_error(self, repository):
        with patch.object(ProductCategoryModel.objects, 'filter', side_effect=DatabaseError('down')):
            with pytest.raises(StoreError):
                repository.update_fields('x', {'deleted': True})

    def test_tables_are_separate(self, repository, stored_tree):
        articles = DjangoCategoryRepository(ArticleCategoryModel)

        assert articles.count() == 0
        assert articles.find_by_id(stored_tree[0].id) is None

    def test_cascade_delete_end_to_end(self, repository, stored_tree):
        root, child, grandchild, other = stored_tree

        result = DeleteCategoryUseCase(repository).execute(root.id)

        assert result.data.affected_count == 3
        assert ProductCategoryModel.objects.filter(deleted=True).count() == 3
        assert ProductCategoryModel.objects.get(id=other.id).deleted is False


class TestDjangoRoleRepository:

    def test_save_and_update_permissions(self):
        repository = DjangoRoleRepository()
        role = repository.save(Role.create(name='Editor', permissions=['read']))

        assert repository.update_fields(role.id, {'permissions': ['write', 'write', 'read']}) is True

        assert repository.find_by_id(role.id).permissions == ['write', 'read']

    def test_update_missing_role(self):
        assert DjangoRoleRepository().update_fields('nope', {'permissions': []}) is False

    def test_find_all_filters_deleted(self):
        repository = DjangoRoleRepository()
        kept = repository.save(Role.create(name='Kept'))
        gone = repository.save(Role.create(name='Gone'))
        repository.update_fields(gone.id, {'deleted': True})

        assert [r.id for r in repository.find_all(deleted=False)] == [kept.id]
