"""Centralized path management for mediator-docs.

Handles default root discovery and the containment check that keeps every
filesystem lookup at or below the configured root.
"""

from pathlib import Path

from mediator_docs.types import OutOfScopeError


def get_default_root() -> Path:
    """Get the default documentation root.

    ./mediator relative to the working directory (checked-out submodule).
    Override it with MEDIATOR_DOCS_ROOT, which settings reads directly.
    """
    return Path.cwd() / "mediator"


def is_within(root: Path, target: Path) -> bool:
    """Check that target is root or one of its descendants.

    Both paths must already be canonical. Compares path components, so
    "/srv/docs2" is not inside "/srv/docs".
    """
    root_parts = root.parts
    return target.parts[: len(root_parts)] == root_parts


def resolve_within(root: Path, relative: str) -> Path:
    """Join relative onto root and canonicalize the result.

    Leading slashes are treated as root-relative, not filesystem-absolute.

    Args:
        root: Canonical root directory
        relative: Caller-supplied path (e.g., "src/Mediator.cs")

    Returns:
        Canonical target path

    Raises:
        OutOfScopeError: If the canonical target is outside root
    """
    normalized = relative.strip().lstrip("/\\") or "."
    try:
        target = (root / normalized).resolve()
    except (OSError, RuntimeError, ValueError) as e:
        # Symlink loops, NUL bytes and similar - treat as unreachable
        raise OutOfScopeError(relative) from e

    if not is_within(root, target):
        raise OutOfScopeError(relative)
    return target


def to_relative(root: Path, target: Path) -> str:
    """POSIX path of target relative to root ('.' for the root itself)."""
    return target.relative_to(root).as_posix()
