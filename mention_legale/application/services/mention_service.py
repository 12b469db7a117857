# mention_legale/application/services/mention_service.py
from __future__ import annotations

import asyncio
import logging

from mention_legale.domain.entreprise.entities import EntrepriseRecord
from mention_legale.domain.entreprise.liens import lien_pappers
from mention_legale.domain.entreprise.repository import RegistreEntreprises
from mention_legale.domain.entreprise.value_objects import Langue, Siren
from mention_legale.domain.mention.redaction import construire_markdown
from mention_legale.domain.representation.services import resoudre_representant

from ..dtos.mention_dto import MentionDTO, MentionsBilinguesDTO
from .chaine_holding_service import ChaineHoldingService

logger = logging.getLogger(__name__)


async def construire_markdown_async(
    record: EntrepriseRecord,
    chaine: ChaineHoldingService,
    *,
    template: str | None = None,
    langue: Langue = Langue.FR,
) -> str:
    """Comme construire_markdown, avec resolution recursive des holdings."""
    if record.personne_morale is None:
        return construire_markdown(record, template=template, langue=langue)

    representant = resoudre_representant(record.personne_morale.composition)
    if representant.est_holding and representant.siren_holding is not None:
        logger.info("Recherche du representant de la holding %s (%s)", representant.nom, representant.siren_holding)
        try:
            origine: Siren | None = Siren(record.siren)
        except ValueError:
            origine = None
        representant = await chaine.resoudre(representant, siren_origine=origine)

    return construire_markdown(record, template=template, langue=langue, representant=representant)


class MentionService:
    """Imperative Shell: lit le registre une fois puis redige la mention."""

    def __init__(self, registre: RegistreEntreprises, chaine: ChaineHoldingService | None = None) -> None:
        self._registre = registre
        self._chaine = chaine or ChaineHoldingService(registre)

    async def obtenir_mention(
        self,
        siren: Siren,
        langue: Langue = Langue.FR,
        template: str | None = None,
    ) -> MentionDTO:
        record = await self._registre.obtenir(siren)
        return await self._rediger(record, langue, template)

    async def obtenir_mentions_bilingues(
        self,
        siren: Siren,
        template: str | None = None,
    ) -> MentionsBilinguesDTO:
        record = await self._registre.obtenir(siren)
        fr, en = await asyncio.gather(
            self._rediger(record, Langue.FR, template),
            self._rediger(record, Langue.EN, template),
        )
        return MentionsBilinguesDTO(siren=siren.valeur, fr=fr, en=en)

    async def _rediger(self, record: EntrepriseRecord, langue: Langue, template: str | None) -> MentionDTO:
        markdown = await construire_markdown_async(record, self._chaine, template=template, langue=langue)
        return MentionDTO.from_markdown(record, langue, markdown, lien_pappers(siren=record.siren))
