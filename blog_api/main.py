from contextlib import asynccontextmanager

import logging
import os

from fastapi import FastAPI, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

from blog_api.api import blog
from blog_api.core.security import AccessDeniedError
from blog_api.db import pool as db_pool
from blog_api.db import sa as db_sa
from blog_api.models.schemas import HealthResponse
from blog_api.services import articles as article_svc
from blog_api.services import tags as tag_svc
from blog_api.services import users as user_svc
from blog_api.services.blog import BlogService


logger = logging.getLogger("blog_api")
security_logger = logging.getLogger("blog_api.security")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # asyncpg serves articles and tags, SQLAlchemy serves users
    await db_pool.connect_db()
    await db_sa.init_sa_engine()
    engine = db_sa.engine()
    if engine is not None:
        from blog_api.db.base import Base
        from blog_api.models import user_models  # noqa: F401 ensure model registration

        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError:
            # Schema may be managed externally with a read-only role
            logger.warning("Skipping table creation", exc_info=True, extra={"event": "create_all_failed"})
    app.state.blog_service = BlogService(articles=article_svc, tags=tag_svc, users=user_svc)
    try:
        yield
    finally:
        await db_sa.close_sa_engine()
        await db_pool.close_db()


app = FastAPI(
    lifespan=lifespan,
    root_path=os.getenv("ROOT_PATH", "")
)
app.include_router(blog.router)


@app.exception_handler(AccessDeniedError)
async def access_denied_handler(request: Request, exc: AccessDeniedError) -> Response:
    # Same outcome for a missing and a wrong password
    security_logger.warning(
        "Access denied",
        extra={"event": "access_denied", "path": request.url.path},
    )
    return Response(status_code=status.HTTP_403_FORBIDDEN)


@app.get("/healthz", response_model=HealthResponse, tags=["health"])
async def healthz() -> HealthResponse:
    return HealthResponse()


_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=_LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
