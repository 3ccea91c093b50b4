# blog_api/api/blog.py
from fastapi import APIRouter, Depends, Query
from typing import Optional

from blog_api.core.deps import get_blog_service
from blog_api.models.schemas import ArticlesTagsResponse, InterestTagsResponse
from blog_api.services.blog import BlogService

router = APIRouter(prefix="/blog", tags=["blog"])


@router.get("/articles-tags", response_model=ArticlesTagsResponse,
            summary="Tags of all published articles (admin password required)")
async def api_articles_tags(
    pwd: Optional[str] = Query(None, description="Admin password"),
    svc: BlogService = Depends(get_blog_service),
) -> ArticlesTagsResponse:
    """
    One inner list per published article, tags in their stored order.
    Missing or wrong ``pwd`` answers 403 with an empty body.
    """
    data = await svc.get_articles_tags(pwd)
    return ArticlesTagsResponse(data=data)


@router.get("/interest-tags", response_model=InterestTagsResponse,
            summary="Most and least used tags, deduplicated")
async def api_interest_tags(svc: BlogService = Depends(get_blog_service)) -> InterestTagsResponse:
    data = await svc.get_interest_tags()
    return InterestTagsResponse(data=data)
