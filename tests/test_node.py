# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for render node classes."""

from hyperform import ElementNode, GroupNode, TextNode


class TestElementNode:
    """Tests for ElementNode."""

    def test_create_element(self):
        """Test creating an element with attributes."""
        node = ElementNode('input', {'name': 'email'})
        assert node.tag == 'input'
        assert node.attr == {'name': 'email'}
        assert node.children == []
        assert node.is_group is False
        assert node.is_text is False

    def test_defaults(self):
        """Test default attributes and children."""
        node = ElementNode('form')
        assert node.attr == {}
        assert len(node) == 0

    def test_get_attr(self):
        """Test get_attr method."""
        node = ElementNode('input', {'type': 'text', 'size': 10})
        assert node.get_attr('type') == 'text'
        assert node.get_attr('missing') is None
        assert node.get_attr('missing', 'default') == 'default'
        assert node.get_attr() == {'type': 'text', 'size': 10}

    def test_set_attr(self):
        """Test set_attr method."""
        node = ElementNode('input')
        node.set_attr({'type': 'text'}, size=10)
        assert node.attr == {'type': 'text', 'size': 10}
        node.set_attr(type='email')
        assert node.attr['type'] == 'email'

    def test_append_and_iterate(self):
        """Test appending children and iterating in order."""
        node = ElementNode('select')
        first = node.append(ElementNode('option'))
        second = node.append(ElementNode('option'))
        assert list(node) == [first, second]
        assert node[1] is second

    def test_repr(self):
        """Test string representation."""
        node = ElementNode('input', {'name': 'q'})
        assert repr(node) == "ElementNode('input', attr={'name': 'q'}, children=0)"

    def test_as_dict(self):
        """Test recursive dict conversion."""
        node = ElementNode('button', {'type': 'submit'}, [TextNode('Go')])
        assert node.as_dict() == {
            'tag': 'button',
            'attr': {'type': 'submit'},
            'children': [{'text': 'Go'}],
        }


class TestGroupAndText:
    """Tests for GroupNode and TextNode."""

    def test_group(self):
        """Test group nodes have no tag."""
        group = GroupNode([TextNode('a')])
        assert group.tag is None
        assert group.is_group is True
        assert len(group) == 1
        group.set_attr(name='x')
        assert group.get_attr('name') == 'x'
        assert group.as_dict() == {'tag': None, 'attr': {'name': 'x'}, 'children': [{'text': 'a'}]}

    def test_text(self):
        """Test text nodes."""
        text = TextNode('hello')
        assert text.text == 'hello'
        assert text.is_text is True
        assert text.tag is None
        assert repr(text) == "TextNode('hello')"

    def test_elements_and_groups_share_attribute_api(self):
        """Test elements and groups use the same attribute methods."""
        assert ElementNode.get_attr is GroupNode.get_attr
        assert ElementNode.set_attr is GroupNode.set_attr
        group = GroupNode(attr={'name': 'g'})
        group.set_attr({'id': 'x'}, hidden=True)
        assert group.get_attr() == {'name': 'g', 'id': 'x', 'hidden': True}
        assert group.get_attr('missing', 'default') == 'default'
