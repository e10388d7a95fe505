import asyncio
import logging
from typing import Iterable, List

from folio.errors import PostNotFoundError
from folio.repos.content_repo import FilesystemContentRepo
from folio.schemas.blog import PostDetail, PostSummary
from folio.services.content_parser import ContentParser

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo: FilesystemContentRepo, parser: ContentParser):
        self.repo = repo
        self.parser = parser

    async def list_posts(self) -> List[PostSummary]:
        """
        Resolve every post's frontmatter concurrently.

        Any single failure aborts the whole listing; results follow the repo's
        slug order, so callers wanting newest-first should use ``sort_posts``.
        """
        tasks = [
            asyncio.to_thread(self.parser.parse_post_summary, slug, path)
            for slug, path in self.repo.items()
        ]
        posts = await asyncio.gather(*tasks)
        logger.debug(f"Indexed {len(posts)} posts")
        return list(posts)

    async def get_post(self, slug: str) -> PostDetail:
        path = self.repo.get_path(slug)
        if path is None:
            raise PostNotFoundError(slug)
        return await asyncio.to_thread(self.parser.parse_post_detail, slug, path)


def sort_posts(posts: Iterable[PostSummary]) -> List[PostSummary]:
    """Newest first; same-day posts fall back to slug order."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.date, reverse=True)
