from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ProjectLink(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    url: str
    icon: str
    alt: str = ""


class Project(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    slug: str
    title: str
    links: List[ProjectLink] = Field(default_factory=list)
    order: int = 0
    content: str = ""  # Rendered HTML description


class ProjectListResponse(BaseModel):
    projects: List[Project] = Field(default_factory=list)
