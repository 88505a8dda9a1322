# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for RefIndex, RefEntry and the Single/Many render handles."""

from hyperform import ElementNode, Many, RefEntry, RefIndex, Single


class TestRefEntry:
    """Tests for RefEntry accumulation."""

    def test_single_handle(self):
        """Test a new entry holds a Single handle."""
        node = ElementNode('input')
        entry = RefEntry(name='a', models=[{'name': 'a'}], partials=Single(node))
        assert entry.nodes == [node]

    def test_promotes_to_many_on_second_add(self):
        """Test the handle becomes Many on the second declaration."""
        first, second = ElementNode('input'), ElementNode('input')
        entry = RefEntry(name='c', models=['c1'], partials=Single(first))
        entry.add('c2', second)
        assert isinstance(entry.partials, Many)
        assert entry.partials.nodes == (first, second)
        assert entry.models == ['c1', 'c2']

    def test_many_is_replaced_not_mutated(self):
        """Test later declarations build a new Many handle."""
        nodes = [ElementNode('option') for _ in range(3)]
        entry = RefEntry(name='o', models=['c0'], partials=Single(nodes[0]))
        entry.add('c1', nodes[1])
        many = entry.partials
        entry.add('c2', nodes[2])
        assert entry.partials is not many
        assert many.nodes == (nodes[0], nodes[1])
        assert entry.nodes == nodes

    def test_nodes_returns_copy(self):
        """Test nodes is a fresh list each time."""
        entry = RefEntry(name='c', models=['c'], partials=Single(ElementNode('input')))
        entry.nodes.append(ElementNode('extra'))
        assert len(entry.nodes) == 1


class TestRefIndex:
    """Tests for RefIndex lookups."""

    def test_empty_index(self):
        """Test an empty index."""
        index = RefIndex()
        assert len(index) == 0
        assert index.names() == []
        assert 'x' not in index
        assert index.get('x') is None

    def test_add_creates_entry(self):
        """Test the first add creates a Single entry."""
        index = RefIndex()
        node = ElementNode('input')
        entry = index.add('email', 'control', node)
        assert index.get('email') is entry
        assert entry.partials == Single(node)
        assert 'email' in index

    def test_single_lookups_collapse(self):
        """Test single declarations return bare values."""
        index = RefIndex()
        control = {'name': 'email'}
        node = ElementNode('input')
        index.add('email', control, node)
        assert index.models('email') is control
        assert index.partials('email') is node

    def test_multiple_lookups_return_lists(self):
        """Test repeated declarations return ordered lists."""
        index = RefIndex()
        n1, n2 = ElementNode('input'), ElementNode('input')
        index.add('color', 'red', n1)
        index.add('color', 'blue', n2)
        assert index.models('color') == ['red', 'blue']
        assert index.partials('color') == [n1, n2]

    def test_missing_returns_index(self):
        """Test unknown names return the index itself."""
        index = RefIndex()
        index.add('a', 'c', ElementNode('input'))
        assert index.models('missing') is index
        assert index.partials('missing') is index

    def test_names_in_first_declaration_order(self):
        """Test names and iteration follow first declaration."""
        index = RefIndex()
        for name in ('b', 'a', 'b', 'c'):
            index.add(name, name, ElementNode('input'))
        assert index.names() == ['b', 'a', 'c']
        assert list(index) == ['b', 'a', 'c']
        assert len(index) == 3

    def test_lookup_lists_are_copies(self):
        """Test returned lists do not alias the index."""
        index = RefIndex()
        index.add('x', 'c1', ElementNode('input'))
        index.add('x', 'c2', ElementNode('input'))
        index.models('x').append('c3')
        index.partials('x').append(None)
        assert index.models('x') == ['c1', 'c2']
        assert len(index.partials('x')) == 2

    def test_keys_distinguish_value_types(self):
        """Test equal-hashing names of different types get separate entries."""
        index = RefIndex()
        declared = [(name, ElementNode('input')) for name in ('1', 1, 1.0, True)]
        for name, node in declared:
            index.add(name, f'control-{name!r}', node)
        assert len(index) == 4
        assert index.names() == ['1', 1, 1.0, True]
        assert [type(name) for name in index] == [str, int, float, bool]
        assert index.models(1) == 'control-1'
        assert index.models(1.0) == 'control-1.0'
        assert index.models(True) == 'control-True'
        assert index.models('1') == "control-'1'"
        assert index.partials(True) is declared[3][1]
        assert index.partials(1) is declared[1][1]

    def test_contains_and_get_use_typed_keys(self):
        """Test membership and get() follow the same key rule."""
        index = RefIndex()
        index.add(0, 'zero', ElementNode('input'))
        assert 0 in index
        assert False not in index
        assert '0' not in index
        assert index.get(False) is None
        assert index.get(0).name == 0
