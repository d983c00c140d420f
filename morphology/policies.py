"""
Policy dataclasses for parameterizing segment tree rendering and checks.

Each policy:
- has defaults defined here
- documents its JSON schema
- round-trips through to_dict() / from_dict() (unknown keys are ignored)
- reports problems via validate(), built on validate_policy()
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, List


def validate_policy(policy: Any, required_fields: Optional[List[str]] = None) -> List[str]:
    """
    Validate a policy object.

    Parameters
    ----------
    policy : Any
        Policy dataclass instance to validate
    required_fields : List[str], optional
        List of field names that must be non-None

    Returns
    -------
    List[str]
        List of validation error messages (empty if valid)
    """
    errors = []

    if required_fields:
        for field_name in required_fields:
            if not hasattr(policy, field_name):
                errors.append(f"Missing required field: {field_name}")
            elif getattr(policy, field_name) is None:
                errors.append(f"Required field is None: {field_name}")

    return errors


def require_valid(policy: Any) -> None:
    """Raise ValueError listing every problem reported by ``policy.validate()``."""
    errors = policy.validate()
    if errors:
        raise ValueError(f"Invalid {type(policy).__name__}: " + "; ".join(errors))


@dataclass
class RenderPolicy:
    """
    Policy for the debug text form of a segment tree.

    The defaults give the standard form, e.g. for a single segment:
        (segment_tree ((segment 0 (point 0 0 0 1) (point 1 0 0 1) 1)) (npos))

    JSON Schema:
    {
        "none_token": str,
        "indent": str (whitespace only),
        "float_format": str (format spec, e.g. "g", ".3f"),
        "one_line_max_segments": int
    }
    """
    none_token: str = "npos"
    indent: str = "  "
    float_format: str = "g"
    one_line_max_segments: int = 1

    def validate(self) -> List[str]:
        errors = validate_policy(
            self, ["none_token", "indent", "float_format", "one_line_max_segments"]
        )
        if errors:
            return errors
        if not self.none_token or any(c.isspace() for c in self.none_token):
            errors.append("none_token must be a non-empty token without whitespace")
        if self.indent.strip():
            errors.append("indent must contain only whitespace")
        try:
            format(1.5, self.float_format)
        except ValueError:
            errors.append(f"float_format is not a valid format spec: {self.float_format!r}")
        if self.one_line_max_segments < 0:
            errors.append("one_line_max_segments must be >= 0")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "RenderPolicy":
        return RenderPolicy(**{k: v for k, v in d.items() if k in RenderPolicy.__dataclass_fields__})


@dataclass
class InvariantCheckPolicy:
    """
    Policy for structural invariant checks.

    JSON Schema:
    {
        "require_single_root": bool,
        "max_reported_issues": int
    }
    """
    require_single_root: bool = False
    max_reported_issues: int = 10

    def validate(self) -> List[str]:
        errors = validate_policy(self, ["require_single_root", "max_reported_issues"])
        if not errors and self.max_reported_issues < 1:
            errors.append("max_reported_issues must be >= 1")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "InvariantCheckPolicy":
        return InvariantCheckPolicy(**{k: v for k, v in d.items() if k in InvariantCheckPolicy.__dataclass_fields__})


__all__ = [
    "validate_policy",
    "require_valid",
    "RenderPolicy",
    "InvariantCheckPolicy",
]
