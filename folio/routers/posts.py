import logging

from fastapi import APIRouter, Depends, HTTPException

from folio import dependencies as deps
from folio.errors import PostNotFoundError
from folio.schemas.blog import PostDetailResponse, PostListResponse
from folio.services.posts_service import PostsService, sort_posts

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=PostListResponse)
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        posts = await service.list_posts()
        return PostListResponse(posts=sort_posts(posts))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetailResponse)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_post(slug)
        return PostDetailResponse(metadata=post.metadata, component=post.content)
    except HTTPException:
        raise
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
