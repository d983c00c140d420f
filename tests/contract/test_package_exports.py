"""
Test that the public package surface imports cleanly.

This module validates that the key modules can be imported without
circular dependencies and that the top-level package re-exports the
operations callers rely on.
"""

import pytest


class TestMorphologyImport:
    """Test morphology package imports cleanly."""
    
    def test_top_level_exports(self):
        """Test the top-level package exposes data types and operations."""
        import morphology
        
        for name in morphology.__all__:
            assert hasattr(morphology, name), name
        assert morphology.__version__ == "0.1.0"
    
    def test_subpackages_import(self):
        """Test each subpackage imports on its own."""
        import morphology.core
        import morphology.ops
        import morphology.adapters
        import morphology.validity
        import morphology.policies
        import morphology.render
        
        assert morphology.ops.split_at is morphology.split_at
        assert morphology.core.SegmentTree is morphology.SegmentTree
    
    def test_error_hierarchy(self):
        """Test that every error derives from MorphologyError."""
        from morphology import (
            MorphologyError,
            InvalidParentError,
            NoSuchSegmentError,
            UnprunedChildError,
        )
        
        assert issubclass(InvalidParentError, MorphologyError)
        assert issubclass(NoSuchSegmentError, MorphologyError)
        assert issubclass(UnprunedChildError, MorphologyError)
        assert issubclass(NoSuchSegmentError, IndexError)


class TestQuickStart:
    """Test the example from the package docstring."""
    
    def test_split_and_rejoin_axon(self):
        """Test detaching the axon and grafting it back onto the soma."""
        from morphology import SegmentTree, Point, split_at, join_at, equivalent
        
        tree = SegmentTree()
        soma = tree.append(None, Point(0, 0, 0, 1), Point(1, 0, 0, 1), tag=1)
        axon = tree.extend_branch(soma, Point(2, 0, 0, 0.5), tag=2)
        tree.extend_branch(soma, Point(1, 1, 0, 0.5), tag=3)
        
        pre, post = split_at(tree, axon)
        
        assert pre.size == 2
        assert post.size == 1
        assert equivalent(join_at(pre, soma, post), tree)
