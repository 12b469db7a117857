# mention_legale/interfaces/api/dependencies.py
from mention_legale.application.services.chaine_holding_service import ChaineHoldingService
from mention_legale.application.services.mention_service import MentionService
from mention_legale.infrastructure.config import Settings, get_settings
from mention_legale.infrastructure.inpi_connection import get_registre


def get_mention_service() -> MentionService:
    registre = get_registre()
    return MentionService(registre=registre, chaine=ChaineHoldingService(registre))


def get_app_settings() -> Settings:
    return get_settings()
