"""
Tests for category tree construction and descendant closure.
"""
from apps.catalog.application.use_cases import GetCategoryTreeUseCase
from apps.catalog.domain.services.category_tree import build_tree, collect_descendant_ids
from apps.catalog.interfaces.serializers import CategoryTreeSerializer
from .fakes import InMemoryCategoryRepository, make_category


def flatten(tree):
    return [node_id for root in tree for node_id in root.ids()]


def chain(depth):
    records = [make_category('n0')]
    records += [make_category(f'n{i}', parent_id=f'n{i - 1}') for i in range(1, depth)]
    return records


class TestBuildTree:

    def test_nests_children_under_their_parent(self, category_tree_records):
        tree = build_tree(category_tree_records, "")

        assert [node.id for node in tree] == ['X', 'S']
        x = tree[0]
        assert [child.id for child in x.children] == ['Y', 'Z']
        assert [child.id for child in x.children[0].children] == ['W']
        assert x.children[1].children == ()

    def test_every_record_appears_exactly_once(self, category_tree_records):
        tree = build_tree(category_tree_records, "")

        ids = flatten(tree)
        assert sorted(ids) == sorted(c.id for c in category_tree_records)
        assert len(ids) == len(set(ids))

    def test_top_level_is_exactly_the_parentless_records(self):
        records = [
            make_category('a'),
            make_category('b', parent_id=None),
            make_category('c', parent_id='a'),
            make_category('d', parent_id='c'),
        ]

        tree = build_tree(records, "")

        assert {node.id for node in tree} == {'a', 'b'}

    def test_custom_root_parent_key(self):
        records = [
            make_category('a', parent_id='0'),
            make_category('b', parent_id='a'),
        ]

        tree = build_tree(records, '0')

        assert [node.id for node in tree] == ['a']
        assert [child.id for child in tree[0].children] == ['b']

    def test_siblings_ordered_by_position_then_input_order(self):
        records = [
            make_category('late', position=None),
            make_category('third', position=3),
            make_category('first', position=1),
            make_category('tie_a', position=2),
            make_category('tie_b', position=2),
        ]

        tree = build_tree(records, "")

        assert [node.id for node in tree] == ['first', 'tie_a', 'tie_b', 'third', 'late']

    def test_orphan_is_promoted_to_top_level(self):
        records = [
            make_category('root', position=2),
            make_category('orphan', parent_id='missing', position=1),
        ]

        tree = build_tree(records, "")

        assert [node.id for node in tree] == ['orphan', 'root']

    def test_two_node_cycle_terminates(self):
        records = [
            make_category('A', parent_id='B'),
            make_category('B', parent_id='A'),
        ]

        tree = build_tree(records, "")

        assert sorted(flatten(tree)) == ['A', 'B']
        assert [node.id for node in tree] == ['A']
        assert [child.id for child in tree[0].children] == ['B']

    def test_self_referencing_record(self):
        tree = build_tree([make_category('A', parent_id='A')], "")

        assert [node.id for node in tree] == ['A']
        assert tree[0].children == ()

    def test_descendant_of_cycle_stays_under_it(self):
        records = [
            make_category('C', parent_id='A'),
            make_category('A', parent_id='B'),
            make_category('B', parent_id='A'),
            make_category('R'),
        ]

        tree = build_tree(records, "")

        ids = flatten(tree)
        assert sorted(ids) == ['A', 'B', 'C', 'R']
        assert len(ids) == 4
        assert [node.id for node in tree] == ['R', 'A']

    def test_empty_input(self):
        assert build_tree([], "") == []

    def test_does_not_filter_deleted_records(self):
        records = [make_category('a', deleted=True), make_category('b', parent_id='a')]

        tree = build_tree(records, "")

        assert flatten(tree) == ['a', 'b']

    def test_input_is_left_untouched(self, category_tree_records):
        before = [(c.id, c.parent_id, c.position) for c in category_tree_records]

        build_tree(category_tree_records, "")

        assert [(c.id, c.parent_id, c.position) for c in category_tree_records] == before


class TestCollectDescendantIds:

    def test_collects_all_levels_breadth_first(self, category_repository):
        assert collect_descendant_ids('X', category_repository) == ['Y', 'Z', 'W']

    def test_leaf_has_no_descendants(self, category_repository):
        assert collect_descendant_ids('W', category_repository) == []

    def test_includes_deleted_children(self):
        repository = InMemoryCategoryRepository([
            make_category('a'),
            make_category('b', parent_id='a', deleted=True),
            make_category('c', parent_id='b'),
        ])

        assert collect_descendant_ids('a', repository) == ['b', 'c']

    def test_terminates_on_cycle(self):
        repository = InMemoryCategoryRepository([
            make_category('a', parent_id='b'),
            make_category('b', parent_id='a'),
        ])

        assert collect_descendant_ids('a', repository) == ['b']

    def test_deep_hierarchy(self):
        records = [make_category('n0')]
        records += [make_category(f'n{i}', parent_id=f'n{i - 1}') for i in range(1, 6)]
        repository = InMemoryCategoryRepository(records)

        assert collect_descendant_ids('n0', repository) == ['n1', 'n2', 'n3', 'n4', 'n5']


class TestDeepHierarchy:

    def test_build_tree_handles_very_deep_chain(self):
        tree = build_tree(chain(5000), "")

        assert len(tree) == 1
        assert tree[0].ids() == [f'n{i}' for i in range(5000)]

    def test_tree_use_case_handles_very_deep_chain(self):
        repository = InMemoryCategoryRepository(chain(5000))

        roots = GetCategoryTreeUseCase(repository).execute().data

        assert len(roots) == 1
        depth = 0
        node = roots[0]
        while node.children:
            assert len(node.children) == 1
            node = node.children[0]
            depth += 1
        assert depth == 4999
        assert node.id == 'n4999'

    def test_tree_serializer_handles_very_deep_chain(self):
        roots = GetCategoryTreeUseCase(InMemoryCategoryRepository(chain(5000))).execute().data

        data = CategoryTreeSerializer(roots, many=True).data

        ids = []
        level = data
        while level:
            ids.append(level[0]['id'])
            level = level[0]['children']
        assert ids == [f'n{i}' for i in range(5000)]

    def test_serializer_keeps_sibling_order(self, category_repository):
        roots = GetCategoryTreeUseCase(category_repository).execute().data

        data = CategoryTreeSerializer(roots, many=True).data

        assert [node['id'] for node in data] == ['X', 'S']
        assert [child['id'] for child in data[0]['children']] == ['Y', 'Z']
        assert data[0]['children'][0]['children'][0]['id'] == 'W'
        assert data[1]['children'] == []
        assert data[0]['position'] == 1
        assert data[0]['status'] == 'active'
