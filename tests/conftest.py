import types

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import blog_api`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient

from blog_api.core.security import hash_one_way
from blog_api.services.blog import BlogService


ADMIN_PASSWORD = "secret"


class FakeUsers:
    def __init__(self, admin=None):
        self.admin = admin
        self.calls = 0

    async def get_admin(self):
        self.calls += 1
        return self.admin


class FakeArticles:
    def __init__(self, articles=None):
        self.articles = articles or []
        self.excludes = []

    async def get_all_published_articles(self, excludes=None):
        self.excludes.append(tuple(excludes or ()))
        return list(self.articles)


class FakeTags:
    def __init__(self, top=None, bottom=None):
        self.top = top or []
        self.bottom = bottom or []
        self.requested = []

    async def get_top_tags(self, k):
        self.requested.append(("top", k))
        return self.top[:k]

    async def get_bottom_tags(self, k):
        self.requested.append(("bottom", k))
        return self.bottom[:k]


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def fake_users():
    admin = types.SimpleNamespace(user_name="admin", user_role="adminRole", user_password=hash_one_way(ADMIN_PASSWORD))
    return FakeUsers(admin=admin)


@pytest.fixture()
def fake_articles():
    return FakeArticles()


@pytest.fixture()
def fake_tags():
    return FakeTags()


@pytest.fixture()
def blog_service(fake_articles, fake_tags, fake_users):
    return BlogService(articles=fake_articles, tags=fake_tags, users=fake_users, interest_tags_limit=10)


@pytest.fixture()
def client(monkeypatch, blog_service):
    # Patch DB init/close in lifespan to no-op
    import blog_api.db.pool as db_pool
    import blog_api.db.sa as db_sa

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_pool, "connect_db", _noop)
    monkeypatch.setattr(db_pool, "close_db", _noop)
    monkeypatch.setattr(db_sa, "init_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "close_sa_engine", _noop)

    from blog_api.core import deps as core_deps
    from blog_api import main as main_mod

    app = main_mod.app
    app.dependency_overrides[core_deps.get_blog_service] = lambda: blog_service

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
