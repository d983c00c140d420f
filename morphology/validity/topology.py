"""
Topology checks for segment trees.

Re-derives the tree invariants from the raw segment and parent lists
instead of trusting the bookkeeping kept by SegmentTree.
"""

from typing import Dict, Any, Optional, TYPE_CHECKING

from ..policies import InvariantCheckPolicy, require_valid

if TYPE_CHECKING:
    from ..core.tree import SegmentTree


def check_tree_invariants(
    tree: "SegmentTree",
    policy: Optional[InvariantCheckPolicy] = None,
) -> Dict[str, Any]:
    """
    Check dense ids, parent-before-child order and child counts.

    Parameters
    ----------
    tree : SegmentTree
        Tree to check
    policy : InvariantCheckPolicy, optional
        Check options (default: InvariantCheckPolicy())

    Returns
    -------
    dict
        Check result with keys:
        - passed: bool
        - message: str
        - details: dict with segment_count, root_count, fork_count,
          terminal_count and the first issues found
    """
    import numpy as np

    policy = policy or InvariantCheckPolicy()
    require_valid(policy)

    segments = tree.segments
    parents = tree.parents
    n = len(segments)
    issues = []

    if len(parents) != n:
        issues.append(f"{n} segments but {len(parents)} parent entries")

    for i, seg in enumerate(segments):
        if seg.id != i:
            issues.append(f"Segment at position {i} has id {seg.id}")

    counts = np.zeros(n, dtype=np.int64)
    for i, par in enumerate(parents[:n]):
        if par is None:
            continue
        if not 0 <= par < i:
            issues.append(f"Segment {i} has parent {par}, expected None or < {i}")
        else:
            counts[par] += 1

    for i in range(n):
        if tree.num_children(i) != counts[i]:
            issues.append(
                f"Segment {i} records {tree.num_children(i)} children, found {counts[i]}"
            )

    root_count = sum(1 for p in parents if p is None)
    if policy.require_single_root and n > 0 and root_count != 1:
        issues.append(f"Expected a single root, found {root_count}")

    details = {
        "segment_count": n,
        "root_count": root_count,
        "fork_count": int(np.sum(counts >= 2)),
        "terminal_count": int(np.sum(counts == 0)),
        "issues": issues[:policy.max_reported_issues],
        "issue_count": len(issues),
    }

    passed = len(issues) == 0
    if passed:
        message = f"Segment tree invariants hold ({n} segments, {root_count} roots)"
    else:
        message = f"Segment tree has {len(issues)} invariant violation(s)"

    return {
        "passed": passed,
        "message": message,
        "details": details,
    }


__all__ = ["check_tree_invariants"]
