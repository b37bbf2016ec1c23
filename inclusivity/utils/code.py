"""Source code helper utilities."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Generator, Iterable, Sequence


def is_excluded(path: Path, patterns: Sequence[str]) -> bool:
    """Return True when ``path`` or any of its parts matches an exclude glob."""

    posix = path.as_posix()
    return any(
        fnmatch(posix, pattern) or any(fnmatch(part, pattern) for part in path.parts)
        for pattern in patterns
    )


def iter_code_files(
    root_paths: Iterable[str],
    extensions: tuple[str, ...] = (".py",),
    exclude: Sequence[str] = (),
) -> Generator[Path, None, None]:
    """Yield code files beneath the provided paths in a stable order.

    A path naming a file is yielded as-is when its suffix matches.
    """

    for root in root_paths:
        root_path = Path(root)
        if root_path.is_file():
            if root_path.suffix in extensions:
                yield root_path
            continue
        for path in sorted(root_path.rglob("*")):
            if path.suffix in extensions and path.is_file() and not is_excluded(path.relative_to(root_path), exclude):
                yield path
