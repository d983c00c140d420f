"""
Tests for Morphology Surgery

This package contains tests for:
- The segment tree store and child index
- Subtree copy, split/join, prune and comparison operations
- Rigid transforms, rendering, policies and adapters
- Property checks over randomly generated forests
"""
