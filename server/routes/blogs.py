"""Blog endpoints: CRUD, read tracking, likes, and related-by-tag."""

import math
from typing import Optional

from fastapi import APIRouter, Query

from recommender import Author, select_related

from ..models import (
    BlogListResponse,
    BlogResponse,
    BlogStatsResponse,
    CreateBlogRequest,
    LikeRequest,
    LikeResponse,
    RelatedBlogsResponse,
    UpdateBlogRequest,
)
from ..services import recommend_for_user
from ..state import get_state

router = APIRouter()


@router.get("", response_model=BlogListResponse)
def list_blogs(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    tag: Optional[str] = None,
    author: Optional[str] = None,
    search: Optional[str] = None,
):
    """List blogs newest first, optionally filtered by tag, author id, or search text."""
    state = get_state()
    blogs, total = state.blog_store.list_blogs(
        tag=tag, author_id=author, search=search, page=page, limit=limit
    )
    return BlogListResponse(
        blogs=blogs,
        total=total,
        total_pages=math.ceil(total / limit),
        current_page=page,
    )


@router.post("", response_model=BlogResponse, status_code=201)
def create_blog(request: CreateBlogRequest):
    """Create a blog; its fingerprint is computed before it is stored."""
    state = get_state()
    author = None
    if request.author_id:
        user = state.user_store.get(request.author_id)
        author = Author(id=user["user_id"], name=user["name"])
    blog = state.blog_store.create(request.title, request.content, request.tags, author)
    return BlogResponse(message="Blog post created successfully", blog=blog)


@router.get("/stats", response_model=BlogStatsResponse)
def blog_stats(user_id: str):
    """Total blogs, blogs authored by user_id, and how many blogs would be recommended to them."""
    state = get_state()
    recommendations, _, _ = recommend_for_user(
        state.blog_store, state.user_store, user_id, state.ranking_config
    )
    return BlogStatsResponse(
        total_blogs=len(state.blog_store),
        my_blogs=state.blog_store.count_by_author(user_id),
        recommendations=len(recommendations),
    )


@router.get("/{blog_id}", response_model=BlogResponse)
def get_blog(blog_id: str, user_id: Optional[str] = None):
    """Read a blog: bumps its read count and, for a known user, records the read."""
    state = get_state()
    if user_id:
        state.user_store.get(user_id)
    blog = state.blog_store.record_read(blog_id)
    if user_id:
        state.user_store.add_to_history(user_id, blog_id)
    return BlogResponse(blog=blog)


@router.put("/{blog_id}", response_model=BlogResponse)
def update_blog(blog_id: str, request: UpdateBlogRequest):
    """Update a blog; the fingerprint is recomputed only if the content changed."""
    state = get_state()
    blog = state.blog_store.update(
        blog_id, title=request.title, content=request.content, tags=request.tags
    )
    return BlogResponse(message="Blog post updated successfully", blog=blog)


@router.delete("/{blog_id}")
def delete_blog(blog_id: str):
    state = get_state()
    state.blog_store.delete(blog_id)
    return {"message": "Blog post deleted successfully"}


@router.post("/{blog_id}/like", response_model=LikeResponse)
def toggle_like(blog_id: str, request: LikeRequest):
    state = get_state()
    state.user_store.get(request.user_id)
    liked, likes = state.blog_store.toggle_like(blog_id, request.user_id)
    return LikeResponse(
        message="Blog post liked" if liked else "Blog post unliked",
        likes=likes,
    )


@router.get("/{blog_id}/related", response_model=RelatedBlogsResponse)
def related_blogs(blog_id: str):
    """Blogs sharing a tag or author, backfilled with the newest ones."""
    state = get_state()
    reference = state.blog_store.get(blog_id)
    related = select_related(
        reference, state.blog_store.all(), config=state.ranking_config
    )
    return RelatedBlogsResponse(related_blogs=related)
