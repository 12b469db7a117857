# mention_legale/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from mention_legale.domain.entreprise.value_objects import Langue

load_dotenv()


@dataclass(frozen=True)
class Settings:
    inpi_base_url: str
    inpi_username: str
    inpi_password: str
    inpi_timeout_seconds: float
    inpi_max_retries: int
    output_template: str | None   # None = gabarit par defaut
    output_language_default: Langue
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    template = os.environ.get("OUTPUT_TEMPLATE", "")
    langue = os.environ.get("OUTPUT_LANGUAGE_DEFAULT", "fr").strip().lower()
    return Settings(
        inpi_base_url=os.environ.get("INPI_BASE_URL", "https://registre-national-entreprises.inpi.fr").rstrip("/"),
        inpi_username=os.environ.get("INPI_USERNAME", ""),
        inpi_password=os.environ.get("INPI_PASSWORD", ""),
        inpi_timeout_seconds=float(os.environ.get("INPI_TIMEOUT_SECONDS", "10")),
        inpi_max_retries=int(os.environ.get("INPI_MAX_RETRIES", "2")),
        # "\n" litteraux acceptes: une variable d'environnement tient sur une ligne
        output_template=template.replace("\\n", "\n") if template.strip() else None,
        output_language_default=Langue.EN if langue == "en" else Langue.FR,
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
