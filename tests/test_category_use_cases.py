"""
Tests for category use cases against an in-memory repository.
"""
from unittest.mock import patch

import pytest

from apps.catalog.application.dtos.category_dto import (
    CategoryCreateDTO,
    CategoryStatusChangeDTO,
    CategoriesStatusChangeDTO,
)
from apps.catalog.application.use_cases import (
    GetCategoryTreeUseCase,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    RestoreCategoryUseCase,
    ChangeCategoryStatusUseCase,
    ChangeCategoriesStatusUseCase,
)
from apps.catalog.application.use_cases.create_category import parse_position
from apps.catalog.domain.exceptions import (
    CategoryNotFoundError,
    InvalidCategoryError,
    InvalidCategoryStatusError,
)
from apps.catalog.domain.value_objects.category_status import CategoryStatus
from shared.domain.exceptions import StoreError
from .fakes import InMemoryCategoryRepository, make_category


class TestDeleteCategory:

    def test_cascades_to_all_descendants(self, category_repository):
        result = DeleteCategoryUseCase(category_repository).execute('X')

        assert result.success
        assert result.data.affected_count == 4
        assert result.data.failed_ids == []
        for category_id in ('X', 'Y', 'Z', 'W'):
            assert category_repository.records[category_id].deleted is True
        assert category_repository.records['S'].deleted is False

    def test_issues_one_update_per_record_target_first(self, category_repository):
        DeleteCategoryUseCase(category_repository).execute('X')

        assert category_repository.update_calls == [
            ('X', {'deleted': True}),
            ('Y', {'deleted': True}),
            ('Z', {'deleted': True}),
            ('W', {'deleted': True}),
        ]

    def test_parent_with_two_children_issues_three_updates(self):
        repository = InMemoryCategoryRepository([
            make_category('category1', parent_id='parent1'),
            make_category('child1', parent_id='category1'),
            make_category('child2', parent_id='category1'),
        ])

        DeleteCategoryUseCase(repository).execute('category1')

        assert len(repository.update_calls) == 3

    def test_leaf_deletes_only_itself(self, category_repository):
        result = DeleteCategoryUseCase(category_repository).execute('W')

        assert result.data.affected_count == 1
        assert category_repository.update_calls == [('W', {'deleted': True})]

    def test_unknown_category_raises_not_found(self, category_repository):
        with pytest.raises(CategoryNotFoundError):
            DeleteCategoryUseCase(category_repository).execute('missing')

        assert category_repository.update_calls == []

    def test_redeleting_deleted_subtree_is_idempotent(self, category_repository):
        use_case = DeleteCategoryUseCase(category_repository)
        use_case.execute('X')

        result = use_case.execute('X')

        assert result.data.affected_count == 4
        assert all(category_repository.records[i].deleted for i in ('X', 'Y', 'Z', 'W'))

    def test_member_failure_does_not_stop_the_others(self, category_repository):
        category_repository.failing_ids = {'Y'}

        result = DeleteCategoryUseCase(category_repository).execute('X')

        assert result.data.affected_count == 3
        assert result.data.failed_ids == ['Y']
        assert result.data.is_partial
        assert category_repository.records['Y'].deleted is False
        assert category_repository.records['W'].deleted is True
        assert category_repository.records['Z'].deleted is True

    def test_total_failure_raises_store_error(self, category_repository):
        category_repository.failing_ids = {'W'}

        with pytest.raises(StoreError):
            DeleteCategoryUseCase(category_repository).execute('W')

    def test_logs_partial_failure(self, category_repository):
        category_repository.failing_ids = {'Z'}

        with patch('apps.catalog.application.use_cases.delete_category.logger') as mock_logger:
            DeleteCategoryUseCase(category_repository).execute('X')

        mock_logger.warning.assert_called_once()
        assert 'Z' in mock_logger.warning.call_args[0][0]


class TestRestoreCategory:

    def test_restore_does_not_cascade(self, category_repository):
        DeleteCategoryUseCase(category_repository).execute('X')

        result = RestoreCategoryUseCase(category_repository).execute('X')

        assert result.success
        assert category_repository.records['X'].deleted is False
        assert category_repository.records['Y'].deleted is True
        assert category_repository.records['W'].deleted is True

    def test_restore_issues_single_update(self, category_repository):
        RestoreCategoryUseCase(category_repository).execute('Y')

        assert category_repository.update_calls == [('Y', {'deleted': False})]

    def test_restore_unknown_category(self, category_repository):
        with pytest.raises(CategoryNotFoundError):
            RestoreCategoryUseCase(category_repository).execute('missing')


class TestChangeCategoryStatus:

    def test_changes_only_the_target(self, category_repository):
        result = ChangeCategoryStatusUseCase(category_repository).execute(
            CategoryStatusChangeDTO(category_id='X', status='inactive')
        )

        assert result.data == 'inactive'
        assert category_repository.records['X'].status == CategoryStatus.INACTIVE
        assert category_repository.records['Y'].status == CategoryStatus.ACTIVE
        assert category_repository.update_calls == [('X', {'status': 'inactive'})]

    def test_invalid_status_issues_no_update(self, category_repository):
        with pytest.raises(InvalidCategoryStatusError):
            ChangeCategoryStatusUseCase(category_repository).execute(
                CategoryStatusChangeDTO(category_id='X', status='bogus')
            )

        assert category_repository.update_calls == []

    def test_unknown_category(self, category_repository):
        with pytest.raises(CategoryNotFoundError):
            ChangeCategoryStatusUseCase(category_repository).execute(
                CategoryStatusChangeDTO(category_id='missing', status='active')
            )


class TestChangeCategoriesStatus:

    def test_updates_all_ids_in_one_call(self, category_repository):
        result = ChangeCategoriesStatusUseCase(category_repository).execute(
            CategoriesStatusChangeDTO(category_ids=['X', 'S', 'X'], status='inactive')
        )

        assert result.data == 2
        assert category_repository.update_many_calls == [(['X', 'S'], {'status': 'inactive'})]
        assert category_repository.update_calls == []

    def test_invalid_status(self, category_repository):
        with pytest.raises(InvalidCategoryStatusError):
            ChangeCategoriesStatusUseCase(category_repository).execute(
                CategoriesStatusChangeDTO(category_ids=['X'], status='archived')
            )

        assert category_repository.update_many_calls == []

    def test_empty_ids(self, category_repository):
        with pytest.raises(InvalidCategoryError):
            ChangeCategoriesStatusUseCase(category_repository).execute(
                CategoriesStatusChangeDTO(category_ids=[], status='active')
            )


class TestCreateCategory:

    def test_non_numeric_position_takes_next_slot(self, category_repository):
        result = CreateCategoryUseCase(category_repository).execute(
            CategoryCreateDTO(title='New Category', position='not a number')
        )

        assert result.data.position == 6
        assert result.data.id in category_repository.records

    def test_numeric_position_is_kept(self, category_repository):
        result = CreateCategoryUseCase(category_repository).execute(
            CategoryCreateDTO(title='New Category', position='10')
        )

        assert result.data.position == 10

    def test_unknown_parent(self, category_repository):
        with pytest.raises(CategoryNotFoundError):
            CreateCategoryUseCase(category_repository).execute(
                CategoryCreateDTO(title='Child', parent_id='missing')
            )

    def test_child_is_placed_under_parent(self, category_repository):
        result = CreateCategoryUseCase(category_repository).execute(
            CategoryCreateDTO(title='Child', parent_id='Z', position=1)
        )

        tree = GetCategoryTreeUseCase(category_repository).execute().data
        z = tree[0].children[1]
        assert [child.id for child in z.children] == [result.data.id]

    def test_blank_title(self, category_repository):
        with pytest.raises(InvalidCategoryError):
            CreateCategoryUseCase(category_repository).execute(CategoryCreateDTO(title='   '))

    def test_invalid_status(self, category_repository):
        with pytest.raises(InvalidCategoryStatusError):
            CreateCategoryUseCase(category_repository).execute(
                CategoryCreateDTO(title='New', status='hidden')
            )

    @pytest.mark.parametrize('raw,expected', [
        (None, None),
        ('', None),
        ('abc', None),
        (True, None),
        (' 7 ', 7),
        (3, 3),
    ])
    def test_parse_position(self, raw, expected):
        assert parse_position(raw) == expected

    @pytest.mark.parametrize('raw', ['99999999999999999999', 2 ** 31, '-2147483649'])
    def test_parse_position_out_of_range(self, raw):
        with pytest.raises(InvalidCategoryError):
            parse_position(raw)

    def test_out_of_range_position_issues_no_write(self, category_repository):
        with pytest.raises(InvalidCategoryError):
            CreateCategoryUseCase(category_repository).execute(
                CategoryCreateDTO(title='New', position='99999999999999999999')
            )

        assert len(category_repository.records) == 5


class TestGetCategoryTree:

    def test_excludes_deleted_categories(self, category_repository):
        DeleteCategoryUseCase(category_repository).execute('Y')

        tree = GetCategoryTreeUseCase(category_repository).execute().data

        assert [node.id for node in tree] == ['X', 'S']
        assert [child.id for child in tree[0].children] == ['Z']

    def test_child_of_deleted_parent_is_promoted(self):
        repository = InMemoryCategoryRepository([
            make_category('a', deleted=True),
            make_category('b', parent_id='a'),
        ])

        tree = GetCategoryTreeUseCase(repository).execute().data

        assert [node.id for node in tree] == ['b']
