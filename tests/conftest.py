import textwrap
from pathlib import Path

import pytest

from folio.errors import PostNotFoundError
from folio.services.content_parser import ContentParser
from folio.services.markdown_renderer import MarkdownRenderer


def write_content(directory: Path, name: str, raw: str) -> Path:
    """Write a dedented content file, creating the directory if needed."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path


def make_parser(code_aliases=None) -> ContentParser:
    return ContentParser(MarkdownRenderer(code_aliases or {"proto": "protobuf"}))


@pytest.fixture
def content_dir(tmp_path):
    """
    A content root with two posts and two projects.
    """
    root = tmp_path / "content"
    write_content(
        root / "posts",
        "a.md",
        """
        ---
        title: A
        description: First post
        date: 2024-01-01
        ---
        Hello from *A*...
        """,
    )
    write_content(
        root / "posts",
        "b.md",
        """
        ---
        title: B
        description: Second post
        date: 2024-02-01
        ---
        Hello from B.
        """,
    )
    write_content(
        root / "projects",
        "gateway.md",
        """
        ---
        title: gRPC Gateway
        order: 1
        links:
          - url: https://github.com/example/grpc-gateway
            icon: /github.svg
            alt: GitHub
        ---
        Bridges gRPC services and HTTP clients.
        """,
    )
    write_content(
        root / "projects",
        "csv-zero.md",
        """
        ---
        title: csv-zero
        ---
        A zero-allocation CSV field iterator.
        """,
    )
    return root


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    async def list_posts(self):
        return self._list_posts_return

    async def get_post(self, slug: str):
        self.requested.append(slug)
        if self._get_post_return is None:
            raise PostNotFoundError(slug)
        return self._get_post_return


class FakeProjectsService:
    def __init__(self, projects=None):
        self.projects = projects or []

    async def list_projects(self):
        return self.projects
