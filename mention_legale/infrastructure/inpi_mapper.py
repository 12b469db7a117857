# mention_legale/infrastructure/inpi_mapper.py
#
# Pure mapper: raw INPI RNE company JSON -> EntrepriseRecord.
#
# Design decisions:
#   - Lenient on optional facts: a missing or unreadable field becomes None and
#     the paragraph shows a placeholder for it. Strict only on the envelope
#     (formality, siren): without them there is nothing to describe, and
#     DonneesInvalides is raised.
#   - Two person formats coexist in compositions: the current one
#     (individu.descriptionPersonne) and the legacy one
#     (personnePhysique.identite.descriptionPersonne). The current one wins.
#     A legacy person without the female code is recorded as male.
#   - Lists (pouvoirs, prenoms) of the wrong JSON type are read as empty.
#   - A holding identifier is kept only when it reduces to 9 digits; anything
#     else cannot be read back from the registry.
from __future__ import annotations

import dataclasses
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from mention_legale.domain.entreprise.entities import (
    Adresse,
    DescriptionPersonne,
    EntrepriseRecord,
    EntrepriseRepresentante,
    PersonneMorale,
    PersonnePhysique,
    Pouvoir,
)
from mention_legale.domain.entreprise.exceptions import DonneesInvalides

logger = logging.getLogger(__name__)


def entreprise_depuis_inpi(payload: Any) -> EntrepriseRecord:
    if not isinstance(payload, dict):
        raise DonneesInvalides("Reponse INPI: objet JSON attendu")
    formality = _dict(payload.get("formality"))
    siren = _texte(formality.get("siren"))
    if not siren:
        raise DonneesInvalides("Reponse INPI sans formality.siren")

    content = _dict(formality.get("content"))
    code_forme = _texte(_dict(content.get("natureCreation")).get("formeJuridique"))

    personne_physique = None
    personne_morale = None
    if content.get("personnePhysique"):
        personne_physique = _personne_physique(_dict(content["personnePhysique"]))
    elif content.get("personneMorale"):
        personne_morale = _personne_morale(_dict(content["personneMorale"]))

    return EntrepriseRecord(
        siren=siren,
        code_forme_juridique=code_forme,
        personne_morale=personne_morale,
        personne_physique=personne_physique,
    )


def _personne_morale(pm: dict[str, Any]) -> PersonneMorale:
    identite = _dict(pm.get("identite"))
    denomination = _texte(_dict(identite.get("entreprise")).get("denomination")) or _texte(pm.get("denomination"))

    montant = _dict(identite.get("description")).get("montantCapital")
    if montant is None:
        montant = _dict(pm.get("capital")).get("montant")

    composition_brute = pm.get("composition")
    composition = None
    if isinstance(composition_brute, dict):
        pouvoirs = composition_brute.get("pouvoirs")
        if not isinstance(pouvoirs, list):
            pouvoirs = []
        composition = tuple(p for p in (_pouvoir(_dict(brut)) for brut in pouvoirs) if p is not None)

    return PersonneMorale(
        denomination=denomination,
        montant_capital=_decimal(montant),
        adresse=_adresse(pm.get("adresseEntreprise")),
        ville_immatriculation=_texte(_dict(pm.get("immatriculationRcs")).get("villeImmatriculation")),
        composition=composition,
    )


def _personne_physique(pp: dict[str, Any]) -> PersonnePhysique:
    identite = _dict(pp.get("identite"))
    desc = _dict(_dict(identite.get("entrepreneur")).get("descriptionPersonne"))
    return PersonnePhysique(
        description=_description(desc) if desc else None,
        adresse_personne=_adresse(pp.get("adressePersonne")),
        adresse_entreprise=_adresse(pp.get("adresseEntreprise")),
    )


def _pouvoir(brut: dict[str, Any]) -> Pouvoir | None:
    if not brut:
        return None
    role_code = _texte(brut.get("roleEntreprise"))

    desc = _dict(_dict(brut.get("individu")).get("descriptionPersonne"))
    if desc:
        return Pouvoir(role_code=role_code, individu=_description(desc))

    # Ancien format: le registre n'y distingue que "2" (F); tout le reste est M
    ancien = _dict(_dict(_dict(brut.get("personnePhysique")).get("identite")).get("descriptionPersonne"))
    if ancien:
        individu = _description(ancien)
        if individu.code_genre != "2":
            individu = dataclasses.replace(individu, code_genre="1")
        return Pouvoir(role_code=role_code, individu=individu)

    entreprise = _dict(brut.get("entreprise"))
    if entreprise:
        return Pouvoir(
            role_code=role_code,
            entreprise=EntrepriseRepresentante(
                denomination=_texte(entreprise.get("denomination")) or "",
                identifiant=_identifiant_holding(entreprise),
            ),
        )
    return Pouvoir(role_code=role_code)


def _identifiant_holding(entreprise: dict[str, Any]) -> str | None:
    for cle in ("siren", "numeroIdentification", "numeroRcs"):
        valeur = _texte(entreprise.get(cle))
        if not valeur:
            continue
        chiffres = "".join(c for c in valeur if c.isdigit())
        if len(chiffres) == 9:
            return chiffres
    return None


def _description(desc: dict[str, Any]) -> DescriptionPersonne:
    prenoms = desc.get("prenoms") or []
    if isinstance(prenoms, str):
        prenoms = [prenoms]
    elif not isinstance(prenoms, list):
        prenoms = []
    return DescriptionPersonne(
        nom=_texte(desc.get("nom")),
        prenoms=tuple(p for p in (_texte(x) for x in prenoms) if p),
        code_genre=_texte(desc.get("genre")),
        date_naissance=_texte(desc.get("dateDeNaissance")),
        lieu_naissance=_texte(desc.get("lieuDeNaissance")),
        nationalite=_texte(desc.get("nationalite")),
    )


def _adresse(brut: Any) -> Adresse | None:
    bloc = _dict(brut)
    # adresseEntreprise enveloppe l'adresse dans une cle "adresse"
    if isinstance(bloc.get("adresse"), dict):
        bloc = bloc["adresse"]
    if not bloc:
        return None
    return Adresse(
        numero_voie=_texte(bloc.get("numVoie")),
        indice_repetition=_texte(bloc.get("indiceRepetition")),
        type_voie=_texte(bloc.get("typeVoie")),
        libelle_voie=_texte(bloc.get("voie")),
        complement_localisation=_texte(bloc.get("complementLocalisation")),
        code_postal=_texte(bloc.get("codePostal")),
        commune=_texte(bloc.get("commune")),
        pays=_texte(bloc.get("pays")),
    )


def _decimal(valeur: Any) -> Decimal | None:
    if valeur is None or isinstance(valeur, bool) or valeur == "":
        return None
    try:
        montant = Decimal(str(valeur).replace(",", ".").replace(" ", ""))
    except InvalidOperation:
        logger.warning("Montant de capital illisible: %r", valeur)
        return None
    return montant if montant.is_finite() else None


def _dict(valeur: Any) -> dict[str, Any]:
    return valeur if isinstance(valeur, dict) else {}


def _texte(valeur: Any) -> str | None:
    if valeur is None or isinstance(valeur, (dict, list)):
        return None
    texte = str(valeur).strip()
    return texte or None
