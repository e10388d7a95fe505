import asyncio
import json
import logging
import shutil
import tempfile
from pathlib import Path
from typing import Dict

from pydantic import BaseModel

from folio.schemas.blog import PostDetailResponse, PostListResponse
from folio.schemas.project import ProjectListResponse
from folio.services.posts_service import PostsService, sort_posts
from folio.services.projects_service import ProjectsService
from folio.store import ContentStore

logger = logging.getLogger(__name__)


async def export_site(store: ContentStore, out_dir: Path) -> Dict[str, int]:
    """
    Write the listing, every post detail and the project list as JSON.

    Everything is resolved before anything is written, so a broken post
    leaves the output directory untouched. The new tree is built in a
    sibling directory and swapped in, so files for removed posts go away.
    """
    posts_service = PostsService(repo=store.posts, parser=store.parser)
    projects_service = ProjectsService(repo=store.projects, parser=store.parser)

    summaries = sort_posts(await posts_service.list_posts())
    details = await asyncio.gather(
        *(posts_service.get_post(p.slug) for p in summaries)
    )
    projects = await projects_service.list_projects()

    out_dir = Path(out_dir)
    out_dir.parent.mkdir(parents=True, exist_ok=True)
    staging = Path(tempfile.mkdtemp(prefix=f".{out_dir.name}-", dir=out_dir.parent))
    staging.chmod(0o755)  # mkdtemp is owner-only
    try:
        _write_tree(staging, summaries, details, projects)
        if out_dir.exists():
            shutil.rmtree(out_dir)
        staging.rename(out_dir)
    except Exception:
        shutil.rmtree(staging, ignore_errors=True)
        raise

    logger.info(f"Exported {len(details)} posts and {len(projects)} projects to {out_dir}")
    return {"posts": len(details), "projects": len(projects)}


def _write_tree(out_dir: Path, summaries, details, projects) -> None:
    (out_dir / "posts").mkdir()
    _write_json(out_dir / "posts.json", PostListResponse(posts=summaries))
    for detail in details:
        _write_json(
            out_dir / "posts" / f"{detail.metadata.slug}.json",
            PostDetailResponse(metadata=detail.metadata, component=detail.content),
        )
    _write_json(out_dir / "projects.json", ProjectListResponse(projects=projects))


def _write_json(path: Path, model: BaseModel) -> None:
    data = model.model_dump(mode="json")
    path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
    )
