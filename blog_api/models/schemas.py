# blog_api/models/schemas.py
from pydantic import BaseModel
from typing import List


# --- Tags of every published article, one inner list per article ---
class ArticlesTagsResponse(BaseModel):
    data: List[List[str]]


# --- Union of the most- and least-used tag titles ---
class InterestTagsResponse(BaseModel):
    data: List[str]


class HealthResponse(BaseModel):
    status: str = "ok"
