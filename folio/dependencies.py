from fastapi import Depends, Request

from folio.services.posts_service import PostsService
from folio.services.projects_service import ProjectsService
from folio.store import ContentStore


def get_store(request: Request) -> ContentStore:
    return request.app.state.store


def get_posts_service(store: ContentStore = Depends(get_store)):
    return PostsService(repo=store.posts, parser=store.parser)


def get_projects_service(store: ContentStore = Depends(get_store)):
    return ProjectsService(repo=store.projects, parser=store.parser)
