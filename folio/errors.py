from pathlib import Path
from typing import Iterable


class ContentError(Exception):
    """Base class for failures while loading site content."""


class PostNotFoundError(ContentError, LookupError):
    def __init__(self, slug: str):
        super().__init__(f"Post not found: {slug}")
        self.slug = slug


class ContentParseError(ContentError, ValueError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class DuplicateSlugError(ContentError, ValueError):
    def __init__(self, slug: str, paths: Iterable[Path]):
        self.slug = slug
        self.paths = sorted(paths)
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"Duplicate slug '{slug}': {names}")
