import logging

from fastapi import APIRouter, Depends, HTTPException

from folio import dependencies as deps
from folio.schemas.project import ProjectListResponse
from folio.services.projects_service import ProjectsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects(
    service: ProjectsService = Depends(deps.get_projects_service),
):
    try:
        return ProjectListResponse(projects=await service.list_projects())
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing projects: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve projects")
