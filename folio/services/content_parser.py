import datetime
import logging
from pathlib import Path
from typing import Any, Dict

import frontmatter
import yaml
from pydantic import ValidationError

from folio.errors import ContentParseError
from folio.schemas.blog import PostDetail, PostSummary
from folio.schemas.project import Project
from folio.services.markdown_renderer import MarkdownRenderer

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, renderer: MarkdownRenderer):
        self.renderer = renderer

    def parse_post_summary(self, slug: str, path: Path) -> PostSummary:
        """Read only the frontmatter of a post; the body is discarded."""
        post = load_document(path)
        return _validate(PostSummary, {**post.metadata, "slug": slug}, path)

    def parse_post_detail(self, slug: str, path: Path) -> PostDetail:
        post = load_document(path)
        summary = _validate(PostSummary, {**post.metadata, "slug": slug}, path)
        return PostDetail(metadata=summary, content=self.renderer.render(post.content))

    def parse_project(self, slug: str, path: Path) -> Project:
        post = load_document(path)
        data = {
            **post.metadata,
            "slug": slug,
            "links": post.metadata.get("links") or [],
            "content": self.renderer.render(post.content),
        }
        return _validate(Project, data, path)


def load_document(path: Path) -> frontmatter.Post:
    """Split a content file into frontmatter and body."""
    try:
        text = path.read_text(encoding="utf-8")
        post = frontmatter.loads(_norm_text(text))
    except (OSError, UnicodeDecodeError) as e:
        raise ContentParseError(path, f"unreadable file ({e})") from e
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise ContentParseError(path, f"malformed frontmatter ({e})") from e

    post.metadata = normalize_dates(post.metadata or {})
    logger.debug(f"Loaded {path} with keys {sorted(post.metadata)}")
    return post


def normalize_dates(metadata: Dict[str, Any], keys=("date",)) -> Dict[str, Any]:
    """YAML gives datetimes for timestamped values; posts only carry a day."""
    for key in keys:
        value = metadata.get(key)
        if isinstance(value, datetime.datetime):
            metadata[key] = value.date()
    return metadata


def _norm_text(s: str) -> str:
    return s.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")


def _validate(model, data: Dict[str, Any], path: Path):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise ContentParseError(path, f"invalid metadata ({fields})") from e
