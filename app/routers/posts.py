import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.post import Category, Post
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog", response_model=List[Post])
async def list_blog_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all blog posts, newest first."""
    try:
        return await service.get_blog_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing blog posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/blog/{slug}", response_model=Post)
async def get_blog_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single blog post by slug."""
    post = await service.get_post(Category.BLOG, slug)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("/space", response_model=List[Post])
async def list_space_entries(service: PostsService = Depends(deps.get_posts_service)):
    """Get all space entries in directory order."""
    try:
        return await service.get_space_entries()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing space entries: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve entries")


@router.get("/space/{slug}", response_model=Post)
async def get_space_entry(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    entry = await service.get_post(Category.SPACE, slug)
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")
    return entry
