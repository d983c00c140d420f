"""
Tests for equivalent: structural equality up to ids and sibling order.
"""

import pytest


def _build(order):
    """
    Build the same three-branch tree with siblings appended in ``order``.
    
    Branch "a" has a child; "b" and "c" are terminals.
    """
    from morphology.core import SegmentTree, Point
    
    branches = {
        "a": (Point(2, 0, 0, 1), 2),
        "b": (Point(1, 1, 0, 1), 3),
        "c": (Point(1, -1, 0, 1), 3),
    }
    tree = SegmentTree()
    root = tree.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), 1)
    ids = {}
    for name in order:
        dist, tag = branches[name]
        ids[name] = tree.extend_branch(root, dist, tag)
    tree.extend_branch(ids["a"], Point(3, 0, 0, 1), 2)
    return tree


class TestEquivalent:
    """Tests for equivalent."""
    
    def test_reflexive(self):
        """Test that a tree is equivalent to itself."""
        from morphology.ops import equivalent
        
        tree = _build("abc")
        
        assert equivalent(tree, tree)
    
    def test_empty_trees(self):
        """Test that two empty trees are equivalent."""
        from morphology.core import SegmentTree
        from morphology.ops import equivalent
        
        assert equivalent(SegmentTree(), SegmentTree())
    
    @pytest.mark.parametrize("order", ["acb", "bac", "bca", "cab", "cba"])
    def test_sibling_order_does_not_matter(self, order):
        """Test that appending siblings in another order stays equivalent."""
        from morphology.ops import equivalent
        
        reference = _build("abc")
        permuted = _build(order)
        
        assert permuted != reference
        assert equivalent(reference, permuted)
        assert equivalent(permuted, reference)
    
    def test_root_order_does_not_matter(self):
        """Test that the order of roots in a forest does not matter."""
        from morphology.core import SegmentTree, Point
        from morphology.ops import equivalent
        
        a = SegmentTree()
        a.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), 1)
        a.append(None, Point(5, 0, 0, 1), Point(6, 0, 0, 1), 1)
        a.extend_branch(1, Point(7, 0, 0, 1), 2)
        
        b = SegmentTree()
        b.append(None, Point(5, 0, 0, 1), Point(6, 0, 0, 1), 1)
        b.extend_branch(0, Point(7, 0, 0, 1), 2)
        b.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), 1)
        
        assert equivalent(a, b)
    
    def test_size_mismatch(self):
        """Test that trees of different size are not equivalent."""
        from morphology.core import Point
        from morphology.ops import equivalent
        
        tree = _build("abc")
        bigger = tree.copy()
        bigger.extend_branch(3, Point(1, 2, 0, 1), 3)
        
        assert not equivalent(tree, bigger)
        assert not equivalent(bigger, tree)
    
    def test_tag_mismatch(self):
        """Test that a different tag breaks equivalence."""
        from morphology.core import SegmentTree, Point
        from morphology.ops import equivalent
        
        a = SegmentTree()
        a.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), 1)
        b = SegmentTree()
        b.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), 2)
        
        assert not equivalent(a, b)
    
    def test_geometry_mismatch(self):
        """Test that a different radius breaks equivalence."""
        from morphology.core import SegmentTree, Point
        from morphology.ops import equivalent
        
        a = SegmentTree()
        a.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), 1)
        b = SegmentTree()
        b.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1.5), 1)
        
        assert not equivalent(a, b)
    
    def test_same_segments_different_topology(self):
        """Test that the same segments under different parents differ."""
        from morphology.core import SegmentTree, Point
        from morphology.ops import equivalent
        
        p, q = Point(0, 0, 0, 1), Point(1, 0, 0, 1)
        chain = SegmentTree()
        chain.append(None, p, q, 1)
        chain.append(0, q, p, 1)
        chain.append(1, p, q, 1)
        
        fork = SegmentTree()
        fork.append(None, p, q, 1)
        fork.append(0, q, p, 1)
        fork.append(0, p, q, 1)
        
        assert not equivalent(chain, fork)
    
    def test_ids_are_ignored(self):
        """Test that equivalent trees with different ids compare equal."""
        from morphology.ops import equivalent, split_at, join_at
        
        tree = _build("abc")
        pre, post = split_at(tree, 1)
        moved = join_at(pre, 0, post)
        
        assert moved != tree
        assert equivalent(moved, tree)
