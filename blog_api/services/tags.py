from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from blog_api.db.pool import pool


TAG_DELIMITER = ","


def parse_tag_string(raw: Optional[str]) -> List[str]:
    """Split an article's comma-joined tag field into trimmed, non-empty titles.

    Commas inside a title cannot be escaped. Stray delimiters and blank
    segments are dropped; the remaining titles keep their original order.
    """
    if not raw:
        return []
    return [t for t in (s.strip() for s in raw.split(TAG_DELIMITER)) if t]


def merge_tag_titles(*tag_lists: Iterable[Mapping]) -> List[str]:
    """Union of the titles of several tag lists, each title once.

    First-seen order is kept, so titles of earlier lists come first.
    """
    titles: dict[str, None] = {}
    for tags in tag_lists:
        for tag in tags:
            titles.setdefault(tag.get("title") or "", None)
    return list(titles)


async def _ranked_tags(k: int, direction: str) -> List[dict]:
    if k <= 0:
        return []
    sql = f"""
    SELECT t.id, t.title, t.reference_count, t.published_ref_count
    FROM tags t
    WHERE t.published_ref_count > 0
    ORDER BY t.published_ref_count {direction}, t.title
    LIMIT $1
    """
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql, k)
        return [dict(r) for r in rows]


async def get_top_tags(k: int) -> List[dict]:
    return await _ranked_tags(k, "DESC")


async def get_bottom_tags(k: int) -> List[dict]:
    return await _ranked_tags(k, "ASC")
