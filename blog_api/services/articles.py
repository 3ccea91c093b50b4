from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional

from blog_api.db.pool import pool


# Columns of the articles table, in select order
ARTICLE_COLUMNS = (
    "id",
    "title",
    "abstract",
    "content",
    "tags",
    "permalink",
    "author_email",
    "comment_count",
    "view_count",
    "put_top",
    "create_date",
    "update_date",
    "had_been_published",
    "is_published",
    "random_double",
)

_ORDER_SQL = "ORDER BY a.put_top DESC, a.create_date DESC"


def _select_columns(excludes: Optional[Iterable[str]]) -> str:
    excluded = set(excludes or ())
    excluded.discard("id")
    return ", ".join(f"a.{c}" for c in ARTICLE_COLUMNS if c not in excluded)


def paginate(page_num: int, page_size: int, window_size: int, total: int) -> Dict[str, Any]:
    """Page count and the window of page numbers around ``page_num``."""
    page_count = math.ceil(total / page_size) if page_size > 0 else 0
    if page_count == 0:
        return {"page_count": 0, "page_nums": []}
    page_num = min(max(page_num, 1), page_count)
    window_size = max(1, min(window_size, page_count))
    first = max(1, page_num - window_size // 2)
    last = first + window_size - 1
    if last > page_count:
        last = page_count
        first = last - window_size + 1
    return {"page_count": page_count, "page_nums": list(range(first, last + 1))}


async def get_all_published_articles(excludes: Optional[Iterable[str]] = None) -> List[dict]:
    sql = f"""
    SELECT {_select_columns(excludes)}
    FROM articles a
    WHERE a.is_published = TRUE
    {_ORDER_SQL}
    """
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql)
        return [dict(r) for r in rows]


async def get_articles(
    page_num: int = 1,
    page_size: int = 20,
    window_size: int = 10,
    published_only: bool = True,
    excludes: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    if page_num < 1 or page_size < 1:
        raise ValueError("page_num and page_size must be positive")
    where_sql = "WHERE a.is_published = TRUE" if published_only else ""
    count_sql = f"SELECT COUNT(*) FROM articles a {where_sql}"
    sql = f"""
    SELECT {_select_columns(excludes)}
    FROM articles a
    {where_sql}
    {_ORDER_SQL}
    LIMIT $1 OFFSET $2
    """
    p = pool()
    async with p.acquire() as conn:
        total = await conn.fetchval(count_sql)
        rows = await conn.fetch(sql, page_size, (page_num - 1) * page_size)

    return {
        "pagination": paginate(page_num, page_size, window_size, total or 0),
        "articles": [dict(r) for r in rows],
    }
