"""Blog request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from recommender import BlogDocument, BlogSummary


class CreateBlogRequest(BaseModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: List[str] = []
    author_id: Optional[str] = None

    @field_validator("title", "tags", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        # Trimmed before the length check, so a blank title is rejected
        if isinstance(v, list):
            return [
                t.strip() if isinstance(t, str) else t
                for t in v
                if not isinstance(t, str) or t.strip()
            ]
        if isinstance(v, str):
            return v.strip()
        return v


class UpdateBlogRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None


class BlogResponse(BaseModel):
    message: Optional[str] = None
    blog: BlogDocument


class BlogListResponse(BaseModel):
    blogs: List[BlogDocument]
    total: int
    total_pages: int
    current_page: int


class BlogStatsResponse(BaseModel):
    total_blogs: int
    my_blogs: int
    recommendations: int


class LikeRequest(BaseModel):
    user_id: str


class LikeResponse(BaseModel):
    message: str
    likes: int


class RelatedBlogsResponse(BaseModel):
    related_blogs: List[BlogSummary]
