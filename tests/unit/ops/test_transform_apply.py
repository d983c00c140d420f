"""
Tests for apply: rigid transforms of whole segment trees.
"""

import pytest
import numpy as np


def _tree():
    from morphology.core import SegmentTree, Point
    
    tree = SegmentTree()
    tree.append(None, Point(0, 0, 0, 2), Point(0, 0, 4, 2), 1)
    tree.extend_branch(0, Point(3, 0, 4, 0.5), 2)
    tree.extend_branch(0, Point(0, 3, 4, 0.5), 3)
    tree.extend_branch(2, Point(0, 6, 4, 0.25), 3)
    return tree


class TestApply:
    """Tests for apply."""
    
    def test_identity_is_equivalent(self):
        """Test that the identity transform gives an equivalent tree."""
        from morphology.core import Isometry
        from morphology.ops import apply, equivalent
        
        tree = _tree()
        
        moved = apply(tree, Isometry.identity())
        
        assert equivalent(tree, moved)
        assert moved == tree
    
    def test_translation_moves_every_point(self):
        """Test that a translation shifts both ends of every segment."""
        from morphology.core import Isometry, Point
        from morphology.ops import apply
        
        tree = _tree()
        
        moved = apply(tree, Isometry.translate(1, -1, 10))
        
        assert moved.parents == tree.parents
        for before, after in zip(tree.segments, moved.segments):
            assert after.id == before.id
            assert after.tag == before.tag
            assert after.prox == Point(before.prox.x + 1, before.prox.y - 1, before.prox.z + 10, before.prox.radius)
            assert after.dist == Point(before.dist.x + 1, before.dist.y - 1, before.dist.z + 10, before.dist.radius)
    
    def test_rotation_preserves_lengths_and_radii(self):
        """Test that a rotation keeps segment lengths and radii."""
        from morphology.core import Isometry
        from morphology.ops import apply
        
        tree = _tree()
        
        moved = apply(tree, Isometry.rotate(0.9, (1, 1, 0)) * Isometry.translate(2, 3, 4))
        
        for before, after in zip(tree.segments, moved.segments):
            length_before = np.linalg.norm(before.dist.to_array() - before.prox.to_array())
            length_after = np.linalg.norm(after.dist.to_array() - after.prox.to_array())
            assert length_after == pytest.approx(length_before)
            assert after.prox.radius == before.prox.radius
            assert after.dist.radius == before.dist.radius
    
    def test_apply_does_not_modify_input(self):
        """Test that the input tree is unchanged."""
        from morphology.core import Isometry
        from morphology.ops import apply
        
        tree = _tree()
        apply(tree, Isometry.translate(5, 5, 5))
        
        assert tree == _tree()
    
    def test_accepts_any_point_transform(self):
        """Test that any object with apply(point) can be used."""
        from morphology.core import Point
        from morphology.ops import apply
        
        class MirrorZ:
            def apply(self, point):
                return Point(point.x, point.y, -point.z, point.radius)
        
        moved = apply(_tree(), MirrorZ())
        
        assert moved.segments[0].dist == Point(0, 0, -4, 2)
    
    def test_empty_tree(self):
        """Test transforming an empty tree."""
        from morphology.core import SegmentTree, Isometry
        from morphology.ops import apply
        
        assert apply(SegmentTree(), Isometry.translate(1, 2, 3)).empty
