# mention_legale/domain/entreprise/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import EntrepriseRecord
from .value_objects import Siren


class RegistreEntreprises(Protocol):
    async def obtenir(self, siren: Siren) -> EntrepriseRecord:
        """Leve EntrepriseIntrouvable, RegistreIndisponible, AuthentificationRefusee
        ou DonneesInvalides (toutes des RegistreErreur)."""
        ...
