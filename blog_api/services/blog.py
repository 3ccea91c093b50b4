from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Protocol, Sequence

from blog_api.config import INTEREST_TAGS_LIMIT
from blog_api.core.security import AccessDeniedError, AdminNotFoundError, verify_password
from blog_api.services.tags import merge_tag_titles, parse_tag_string


logger = logging.getLogger("blog_api.blog")

# Heavy or internal article fields left out of the tags dump
ARTICLES_TAGS_EXCLUDES = (
    "content",
    "update_date",
    "create_date",
    "author_email",
    "had_been_published",
    "is_published",
    "random_double",
)


class ArticleQueryService(Protocol):
    async def get_all_published_articles(self, excludes: Optional[Iterable[str]] = None) -> List[dict]: ...


class TagQueryService(Protocol):
    async def get_top_tags(self, k: int) -> Sequence[Mapping]: ...

    async def get_bottom_tags(self, k: int) -> Sequence[Mapping]: ...


class UserQueryService(Protocol):
    async def get_admin(self): ...


class BlogService:
    """Tag endpoints of the blog, built on injected query services."""

    def __init__(
        self,
        articles: ArticleQueryService,
        tags: TagQueryService,
        users: UserQueryService,
        interest_tags_limit: int = INTEREST_TAGS_LIMIT,
    ) -> None:
        self.articles = articles
        self.tags = tags
        self.users = users
        self.interest_tags_limit = interest_tags_limit

    async def authorize_admin(self, pwd: Optional[str]) -> None:
        """Raise AccessDeniedError unless ``pwd`` is the admin password.

        An empty password is rejected before the admin account is loaded.
        """
        if not pwd:
            raise AccessDeniedError()
        admin = await self.users.get_admin()
        if admin is None:
            raise AdminNotFoundError("Admin account not found")
        if not verify_password(pwd, admin.user_password):
            raise AccessDeniedError()

    async def get_articles_tags(self, pwd: Optional[str]) -> List[List[str]]:
        await self.authorize_admin(pwd)
        articles = await self.articles.get_all_published_articles(excludes=ARTICLES_TAGS_EXCLUDES)
        data = [parse_tag_string(a.get("tags")) for a in articles]
        logger.info(
            "Articles tags dumped",
            extra={"event": "articles_tags_dumped", "articles": len(data)},
        )
        return data

    async def get_interest_tags(self) -> List[str]:
        top_tags = await self.tags.get_top_tags(self.interest_tags_limit)
        bottom_tags = await self.tags.get_bottom_tags(self.interest_tags_limit)
        return merge_tag_titles(top_tags, bottom_tags)
