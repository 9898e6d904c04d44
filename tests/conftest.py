import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from excavator import create_app  # noqa: E402
from excavator.routes.excavation_api import _excavation_cache, _excavation_cache_lock  # noqa: E402

# Reference token in the shape produced by the token source: prefix + 58 base62 chars.
SAMPLE_TOKEN = "nft1qgqarlcwfjj7ct7kvh0zt067am2mgewp4y7a2nzfx8d9x8mudmes4u8mnv"


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _clear_excavation_cache():
    """Cached records keyed by config must not leak between tests that tweak config."""
    with _excavation_cache_lock:
        _excavation_cache.clear()
    yield


@pytest.fixture()
def sample_token():
    return SAMPLE_TOKEN
