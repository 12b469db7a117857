# mention_legale/application/services/chaine_holding_service.py
#
# Recursive resolver: walks a chain of corporate representatives (holdings)
# until a natural person is found.
#
# Design decisions:
#   - Explicit loop with a visited set and a depth counter, both local to one
#     call. Two concurrent calls (FR and EN renders) never share them.
#   - Fetches are strictly sequential: each step needs the previous record.
#   - Any failure inside the walk (registry error, malformed record) degrades
#     to the holding-only result and is logged at WARNING. The caller never
#     sees an exception from here.
#   - Only the top-level holding is reported. Intermediate holdings are
#     traversed, never shown.
#
# Invariants:
#   - At most profondeur_max registry reads per call.
#   - The result is always the starting holding (name, role, SIREN), with the
#     natural person as representant_holding when one was found.
from __future__ import annotations

import dataclasses
import logging

from mention_legale.domain.entreprise.exceptions import RegistreErreur
from mention_legale.domain.entreprise.repository import RegistreEntreprises
from mention_legale.domain.entreprise.value_objects import Siren
from mention_legale.domain.representation.entities import RepresentantResolu
from mention_legale.domain.representation.services import resoudre_representant

logger = logging.getLogger(__name__)

PROFONDEUR_MAX = 5


class ChaineHoldingService:
    """Imperative Shell: lit le registre a chaque maillon et appelle le resolveur pur."""

    def __init__(self, registre: RegistreEntreprises, profondeur_max: int = PROFONDEUR_MAX) -> None:
        self._registre = registre
        self._profondeur_max = profondeur_max

    async def resoudre(
        self,
        holding: RepresentantResolu,
        *,
        siren_origine: Siren | None = None,
    ) -> RepresentantResolu:
        """Holding avec sa personne physique si la chaine aboutit, sinon la holding seule.

        siren_origine (la societe dont on redige la mention) est marque comme
        deja visite: une holding qui renvoie vers elle arrete la recherche.
        """
        if not holding.est_holding or holding.siren_holding is None:
            return holding

        visites: set[Siren] = {siren_origine} if siren_origine is not None else set()
        siren = holding.siren_holding
        restant = self._profondeur_max

        while True:
            if siren in visites:
                logger.warning("Cycle de holdings detecte sur %s (holding %s)", siren, holding.nom)
                return holding
            if restant <= 0:
                logger.warning("Profondeur maximale atteinte pour la holding %s", holding.nom)
                return holding
            visites.add(siren)
            restant -= 1

            try:
                record = await self._registre.obtenir(siren)
                composition = record.personne_morale.composition if record.personne_morale else None
                suivant = resoudre_representant(composition) if composition else None
            except (RegistreErreur, ValueError, KeyError, TypeError) as err:
                logger.warning("Lecture de la holding %s impossible: %s", siren, err)
                return holding

            if suivant is None or suivant.par_defaut:
                logger.warning("Aucun representant exploitable pour la holding %s", siren)
                return holding

            if suivant.est_personne_physique:
                logger.debug("Personne physique %s trouvee via %s", suivant.nom, siren)
                return dataclasses.replace(holding, representant_holding=suivant)

            if suivant.siren_holding is None:
                logger.warning("Holding %s sans SIREN exploitable, arret de la chaine", suivant.nom)
                return holding
            siren = suivant.siren_holding
