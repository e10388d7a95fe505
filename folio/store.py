from dataclasses import dataclass

from folio.repos.content_repo import FilesystemContentRepo
from folio.services.content_parser import ContentParser
from folio.services.markdown_renderer import MarkdownRenderer
from folio.settings import Settings, settings


@dataclass(frozen=True)
class ContentStore:
    posts: FilesystemContentRepo
    projects: FilesystemContentRepo
    parser: ContentParser


def build_store(current_settings: Settings = settings) -> ContentStore:
    """
    Scan the content directories and pair them with a parser.
    Called once at startup (or per export run), never at import time.
    """
    extensions = current_settings.CONTENT_EXTENSIONS
    posts = FilesystemContentRepo(current_settings.posts_dir, extensions).scan()
    projects = FilesystemContentRepo(current_settings.projects_dir, extensions).scan()
    parser = ContentParser(MarkdownRenderer(current_settings.CODE_ALIASES))
    return ContentStore(posts=posts, projects=projects, parser=parser)
