from __future__ import annotations

from fastapi import Request

from blog_api.services.blog import BlogService


def get_blog_service(request: Request) -> BlogService:
    return request.app.state.blog_service
