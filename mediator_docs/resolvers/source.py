"""Read-only browser over the files below the documentation root.

Every path goes through resolve_within before the filesystem is touched,
for reads and listings alike.
"""

import logging
from pathlib import Path

from mediator_docs.paths import resolve_within, to_relative
from mediator_docs.types import NotFound, SourceFile, SourceListing, Success

logger = logging.getLogger(__name__)

# Cap on files returned by a listing
MAX_LISTED_FILES = 100

# Cap on "did you mean" suggestions for a missing file
MAX_SUGGESTIONS = 5


def _normalize_extension(extension: str | None) -> str | None:
    """Accept "cs", ".cs" or "*.cs"; return ".cs" (lower-case) or None."""
    if not extension or not extension.strip():
        return None
    return "." + extension.strip().lstrip("*").lstrip(".").lower()


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


class SourceTree:
    """Reads and lists files below a canonical root."""

    def __init__(self, root: Path):
        self.root = root

    def read_file(self, relative_path: str) -> Success[SourceFile] | NotFound:
        """Read a file below the root.

        A missing file yields up to MAX_SUGGESTIONS sibling files whose name
        contains the requested file's stem.

        Raises:
            OutOfScopeError: If the path resolves outside the root
        """
        target = resolve_within(self.root, relative_path)
        logger.debug(f"read_source: path={relative_path}")

        try:
            if target.is_file():
                content = target.read_text(encoding="utf-8", errors="replace")
                return Success(
                    SourceFile(
                        path=to_relative(self.root, target),
                        extension=target.suffix.lstrip("."),
                        content=content,
                    )
                )
            if target.is_dir():
                return NotFound(
                    name=relative_path,
                    location=to_relative(self.root, target),
                    reason="is a directory, use list_source",
                )
            suggestions = self._similar_files(target)
        except OSError as e:
            logger.warning(f"Failed to read {target}: {e}")
            return NotFound(name=relative_path, location=str(target), reason=e.strerror or str(e))

        return NotFound(name=relative_path, suggestions=suggestions, location=to_relative(self.root, target))

    def list_directory(self, relative_dir: str = ".", extension: str | None = None) -> Success[SourceListing] | NotFound:
        """List a directory below the root.

        Immediate subdirectories are always listed. Files are collected
        recursively, filtered by extension, sorted by path and capped at
        MAX_LISTED_FILES. Hidden entries are skipped.

        Raises:
            OutOfScopeError: If the directory resolves outside the root
        """
        target = resolve_within(self.root, relative_dir or ".")
        suffix = _normalize_extension(extension)
        logger.debug(f"list_source: dir={relative_dir}, extension={suffix}")

        try:
            if not target.is_dir():
                return NotFound(
                    name=relative_dir,
                    suggestions=self._subdirectories(self.root),
                    location=to_relative(self.root, target),
                )

            subdirectories = self._subdirectories(target)
            files = sorted(
                to_relative(self.root, path)
                for path in target.rglob("*")
                if path.is_file()
                and not _is_hidden(path.relative_to(target))
                and (suffix is None or path.suffix.lower() == suffix)
            )
        except OSError as e:
            logger.warning(f"Failed to list {target}: {e}")
            return NotFound(name=relative_dir, location=str(target), reason=e.strerror or str(e))

        return Success(
            SourceListing(
                directory=to_relative(self.root, target),
                subdirectories=subdirectories,
                files=files[:MAX_LISTED_FILES],
                extension=suffix,
                truncated=len(files) > MAX_LISTED_FILES,
            )
        )

    def _subdirectories(self, directory: Path) -> list[str]:
        return sorted(p.name for p in directory.iterdir() if p.is_dir() and not p.name.startswith("."))

    def _similar_files(self, target: Path) -> list[str]:
        parent = target.parent
        if not parent.is_dir():
            return []
        stem = target.stem
        similar = sorted(
            to_relative(self.root, p) for p in parent.iterdir() if p.is_file() and stem in p.name
        )
        return similar[:MAX_SUGGESTIONS]
