# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest
from fabriques import RegistreEnMemoire, registre_demo
from fastapi.testclient import TestClient


@pytest.fixture
def registre_api() -> RegistreEnMemoire:
    return registre_demo()


@pytest.fixture
def client(registre_api: RegistreEnMemoire, monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """TestClient FastAPI avec registre en memoire injecte."""
    from mention_legale.infrastructure import inpi_connection
    from mention_legale.infrastructure.config import get_settings

    for cle in ("OUTPUT_TEMPLATE", "OUTPUT_LANGUAGE_DEFAULT"):
        monkeypatch.delenv(cle, raising=False)
    get_settings.cache_clear()
    inpi_connection.set_registre(registre_api)

    from mention_legale.interfaces.api.main import app

    with TestClient(app) as c:
        yield c

    inpi_connection.set_registre(None)
    get_settings.cache_clear()
