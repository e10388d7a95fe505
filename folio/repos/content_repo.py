import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from folio.errors import DuplicateSlugError

logger = logging.getLogger(__name__)


class FilesystemContentRepo:
    """
    Slug -> file mapping for one content directory.

    Only regular files directly under ``directory`` are considered; nested
    folders never produce slugs. Call ``scan()`` once, then look up by slug.
    """

    def __init__(self, directory: Path, extensions: Iterable[str]):
        self.directory = Path(directory)
        # Longest first so ".svelte.md" wins over ".md"
        self.extensions = sorted(set(extensions), key=len, reverse=True)
        self._paths: Dict[str, Path] = {}

    def scan(self) -> "FilesystemContentRepo":
        if not self.directory.is_dir():
            logger.warning(f"Content directory not found: {self.directory}")
            self._paths = {}
            return self

        found: Dict[str, List[Path]] = {}
        for path in sorted(self.directory.iterdir()):
            if not path.is_file() or path.name.startswith("."):
                continue
            slug = self.slug_for(path)
            if slug is None:
                continue
            found.setdefault(slug, []).append(path)

        for slug, paths in found.items():
            if len(paths) > 1:
                raise DuplicateSlugError(slug, paths)

        self._paths = {slug: paths[0] for slug, paths in sorted(found.items())}
        logger.info(f"Found {len(self._paths)} content files in {self.directory}")
        return self

    def slug_for(self, path: Path) -> Optional[str]:
        """Filename with directory and supported extension stripped."""
        name = path.name
        for ext in self.extensions:
            if name.endswith(ext) and len(name) > len(ext):
                return name[: -len(ext)]
        return None

    def slugs(self) -> List[str]:
        return list(self._paths)

    def get_path(self, slug: str) -> Optional[Path]:
        return self._paths.get(slug)

    def items(self) -> List[Tuple[str, Path]]:
        return list(self._paths.items())

    def __len__(self) -> int:
        return len(self._paths)
