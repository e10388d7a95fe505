import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.routers import posts, projects
from folio.settings import settings
from folio.store import build_store

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="folio", description="Portfolio projects and markdown blog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = build_store(settings)
    logger.info(
        f"Content indexed: {len(app.state.store.posts)} posts, "
        f"{len(app.state.store.projects)} projects"
    )

    try:
        yield
    finally:
        logger.info("Shutting down")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(projects.router)


@app.get("/")
async def root():
    return {"message": f"{settings.SITE_TITLE} is running"}
