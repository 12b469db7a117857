# tests/conftest.py
from __future__ import annotations

import pytest
from fabriques import RegistreEnMemoire


@pytest.fixture
def registre() -> RegistreEnMemoire:
    return RegistreEnMemoire()
