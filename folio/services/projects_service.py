import asyncio
import logging
from typing import List

from folio.repos.content_repo import FilesystemContentRepo
from folio.schemas.project import Project
from folio.services.content_parser import ContentParser

logger = logging.getLogger(__name__)


class ProjectsService:
    def __init__(self, repo: FilesystemContentRepo, parser: ContentParser):
        self.repo = repo
        self.parser = parser

    async def list_projects(self) -> List[Project]:
        """Landing page project cards, ordered by ``order`` then title."""
        tasks = [
            asyncio.to_thread(self.parser.parse_project, slug, path)
            for slug, path in self.repo.items()
        ]
        projects = await asyncio.gather(*tasks)
        logger.debug(f"Loaded {len(projects)} projects")
        return sorted(projects, key=lambda p: (p.order, p.title.lower()))
