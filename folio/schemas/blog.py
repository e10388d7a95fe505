import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostSummary(BaseModel):
    # YAML reads `title: 1984` as an int
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    slug: str
    title: str
    description: str
    date: datetime.date

    @field_validator("description", mode="before")
    @classmethod
    def _blank_description(cls, value):
        # An empty `description:` key loads as None
        return "" if value is None else value


class PostDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    metadata: PostSummary
    content: str  # Rendered HTML body without frontmatter


class PostListResponse(BaseModel):
    posts: List[PostSummary] = Field(default_factory=list)


class PostDetailResponse(BaseModel):
    metadata: PostSummary
    component: str
