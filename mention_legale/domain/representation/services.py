# mention_legale/domain/representation/services.py
#
# Pure domain service selecting the acting representative of a company.
#
# Design decisions:
#   - Two-tier selection, kept literally: a president-coded entry always wins
#     (first one in input order); only when there is none are the entries
#     ranked by PRIORITE_ROLES. Collapsing both tiers into one sort would
#     change which entry wins when several ranked roles co-occur.
#   - The ranking uses sorted(), which is stable: unknown codes sort after all
#     known codes and keep their input order among themselves. The input
#     composition is never mutated.
#   - No IO and no recursion here. A corporate representative is returned as a
#     holding carrying its extracted SIREN; walking the chain is the job of
#     ChaineHoldingService in the application layer.
#
# Invariants:
#   - resoudre_representant never raises: an empty or unusable composition
#     yields representant_par_defaut().
#   - A holding result has genre None and no representant_holding.
from __future__ import annotations

import logging
from collections.abc import Sequence

from mention_legale.domain import valeurs_par_defaut
from mention_legale.domain.entreprise.entities import EntrepriseRepresentante, Pouvoir
from mention_legale.domain.entreprise.value_objects import Siren, genre_depuis_code
from mention_legale.domain.mention.formatage import formater_nom_representant

from .entities import RepresentantResolu
from .roles import libelle_role, libelle_role_anglais_par_code

logger = logging.getLogger(__name__)

CODES_PRESIDENT: tuple[str, ...] = ("5132", "73")
# Highest priority first. Codes absent from this list rank after all of them.
PRIORITE_ROLES: tuple[str, ...] = ("5132", "73", "51", "30", "53")


def representant_par_defaut() -> RepresentantResolu:
    return RepresentantResolu(
        nom=valeurs_par_defaut.NOM_REPRESENTANT,
        role=valeurs_par_defaut.QUALITE_REPRESENTANT,
        role_anglais=valeurs_par_defaut.QUALITE_REPRESENTANT,
        par_defaut=True,
    )


def extraire_siren(entreprise: EntrepriseRepresentante) -> Siren | None:
    """SIREN exploitable pour relire la holding au registre, sinon None."""
    if not entreprise.identifiant:
        return None
    try:
        return Siren(entreprise.identifiant)
    except ValueError:
        logger.debug("Identifiant inexploitable pour %s: %r", entreprise.denomination, entreprise.identifiant)
        return None


def _rang(pouvoir: Pouvoir) -> int:
    if pouvoir.role_code in PRIORITE_ROLES:
        return PRIORITE_ROLES.index(pouvoir.role_code)
    return len(PRIORITE_ROLES)


def selectionner_pouvoir(composition: Sequence[Pouvoir]) -> Pouvoir:
    """Premier president s'il existe, sinon le mieux classe selon PRIORITE_ROLES."""
    president = next((p for p in composition if p.role_code in CODES_PRESIDENT), None)
    if president is not None:
        return president
    return sorted(composition, key=_rang)[0]


def resoudre_representant(composition: Sequence[Pouvoir] | None) -> RepresentantResolu:
    if not composition:
        return representant_par_defaut()

    logger.debug(
        "%d pouvoirs: %s",
        len(composition),
        [(p.role_code, "entreprise" if p.entreprise else "personne") for p in composition],
    )
    pouvoir = selectionner_pouvoir(composition)

    if pouvoir.individu is not None:
        desc = pouvoir.individu
        return RepresentantResolu(
            nom=formater_nom_representant(desc.prenoms, desc.nom or ""),
            role=libelle_role(pouvoir.role_code),
            role_code=pouvoir.role_code,
            role_anglais=libelle_role_anglais_par_code(pouvoir.role_code),
            genre=genre_depuis_code(desc.code_genre),
        )

    if pouvoir.entreprise is not None and pouvoir.entreprise.denomination.strip():
        entreprise = pouvoir.entreprise
        siren = extraire_siren(entreprise)
        logger.debug("Representant personne morale %r (SIREN %s)", entreprise.denomination, siren)
        return RepresentantResolu(
            nom=entreprise.denomination.strip(),
            role=libelle_role(pouvoir.role_code),
            role_code=pouvoir.role_code,
            role_anglais=libelle_role_anglais_par_code(pouvoir.role_code),
            est_holding=True,
            siren_holding=siren,
        )

    return representant_par_defaut()
