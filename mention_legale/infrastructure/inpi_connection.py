# mention_legale/infrastructure/inpi_connection.py
from __future__ import annotations

from mention_legale.domain.entreprise.repository import RegistreEntreprises

from .config import get_settings
from .inpi_client import InpiRegistre

_registre: RegistreEntreprises | None = None


def get_registre() -> RegistreEntreprises:
    global _registre  # noqa: PLW0603
    if _registre is None:
        settings = get_settings()
        _registre = InpiRegistre(
            settings.inpi_base_url,
            settings.inpi_username,
            settings.inpi_password,
            timeout_seconds=settings.inpi_timeout_seconds,
            max_retries=settings.inpi_max_retries,
        )
    return _registre


def set_registre(registre: RegistreEntreprises | None) -> None:
    """Usage en tests pour injecter un registre en memoire."""
    global _registre  # noqa: PLW0603
    _registre = registre


async def fermer_registre() -> None:
    global _registre  # noqa: PLW0603
    if isinstance(_registre, InpiRegistre):
        await _registre.fermer()
    _registre = None
