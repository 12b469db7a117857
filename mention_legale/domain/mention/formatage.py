# mention_legale/domain/mention/formatage.py
#
# Fact formatter: pure, locale-aware formatting of the facts embedded in the
# legal paragraph (amounts, identifiers, person names, city names, addresses).
#
# Design decisions:
#   - Amounts are Decimal end to end. Never float.
#   - Thousands separators and the space before the euro sign are U+00A0 so
#     that word processors never break "10 000,00 €" across lines.
#   - Identifiers that are not 9 digits are returned untouched: validation
#     happens at the input boundary (Siren value object), never here.
from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal

from mention_legale.domain import valeurs_par_defaut
from mention_legale.domain.entreprise.entities import Adresse
from mention_legale.domain.entreprise.value_objects import ESPACE_INSECABLE, Siren

_TYPES_VOIE: dict[str, str] = {
    "ALL": "allée",
    "AV": "avenue",
    "BD": "boulevard",
    "CHE": "chemin",
    "CRS": "cours",
    "FG": "faubourg",
    "IMP": "impasse",
    "LD": "lieu-dit",
    "PASS": "passage",
    "PL": "place",
    "QUAI": "quai",
    "RTE": "route",
    "RUE": "rue",
    "SQ": "square",
    "VOIE": "voie",
    "ZA": "zone d'activité",
    "ZI": "zone industrielle",
}

_INDICES_REPETITION: dict[str, str] = {"B": "bis", "T": "ter", "Q": "quater", "C": "quinquies"}

_PAYS_FRANCE = {"FRANCE", "FRA", "FR"}

# Words kept lowercase inside a composed French place name.
_PARTICULES = {"à", "au", "aux", "d", "de", "des", "du", "en", "et", "l", "la", "le", "les", "lès", "lez", "sous", "sur"}

_SEPARATEURS = re.compile(r"([\s\-']+)")


def valeur_ou_defaut(valeur: object, defaut: str) -> str:
    """str(valeur) nettoyee, ou defaut si absente ou vide."""
    if valeur is None:
        return defaut
    texte = str(valeur).strip()
    return texte or defaut


def formater_siren(siren: str) -> str:
    if len(siren) != 9 or not siren.isdigit():
        return siren
    return Siren(siren).formate


def formater_nombre_francais(montant: Decimal) -> str:
    """10000 -> '10 000,00' (separateur de milliers insecable)."""
    anglais = f"{montant:,.2f}"
    return anglais.replace(",", ESPACE_INSECABLE).replace(".", ",")


def formater_nombre_anglais(montant: Decimal) -> str:
    """10000 -> '10,000.00'."""
    return f"{montant:,.2f}"


def _capitaliser(mot: str) -> str:
    return mot[:1].upper() + mot[1:].lower()


def formater_prenom(prenom: str) -> str:
    """Les prenoms saisis en capitales sont remis en casse de titre; les autres sont gardes."""
    prenom = prenom.strip()
    if prenom != prenom.upper():
        return prenom
    morceaux = _SEPARATEURS.split(prenom)
    return "".join(m if _SEPARATEURS.fullmatch(m) else _capitaliser(m) for m in morceaux)


def formater_nom_representant(prenoms: Sequence[str], nom: str) -> str:
    """'Jean' + 'Dupont' -> 'Jean DUPONT'."""
    premier = next((p for p in prenoms if p and p.strip()), "")
    morceaux = [formater_prenom(premier), nom.strip().upper()]
    nom_complet = " ".join(m for m in morceaux if m)
    return nom_complet or valeurs_par_defaut.NOM_REPRESENTANT


def formater_nom_ville(ville: str) -> str:
    """'SAINT-ETIENNE' -> 'Saint-Etienne', 'BOULOGNE-SUR-MER' -> 'Boulogne-sur-Mer'."""
    morceaux = _SEPARATEURS.split(ville.strip())
    resultat: list[str] = []
    premier_mot = True
    for morceau in morceaux:
        if not morceau or _SEPARATEURS.fullmatch(morceau):
            resultat.append(morceau)
            continue
        if not premier_mot and morceau.lower() in _PARTICULES:
            resultat.append(morceau.lower())
        else:
            resultat.append(_capitaliser(morceau))
        premier_mot = False
    return "".join(resultat)


def formater_adresse(adresse: Adresse | None) -> str:
    """'123 rue de la Paix, 75001 Paris'. Chaine vide si rien n'est connu."""
    if adresse is None:
        return ""

    type_voie = adresse.type_voie.strip() if adresse.type_voie else ""
    indice = adresse.indice_repetition.strip().upper() if adresse.indice_repetition else ""
    voie = " ".join(
        p
        for p in (
            adresse.numero_voie.strip() if adresse.numero_voie else "",
            _INDICES_REPETITION.get(indice, indice.lower()),
            _TYPES_VOIE.get(type_voie.upper(), type_voie.lower()),
            adresse.libelle_voie.strip() if adresse.libelle_voie else "",
        )
        if p
    )
    commune = " ".join(
        p
        for p in (
            adresse.code_postal.strip() if adresse.code_postal else "",
            formater_nom_ville(adresse.commune) if adresse.commune else "",
        )
        if p
    )
    pays = ""
    if adresse.pays and adresse.pays.strip().upper() not in _PAYS_FRANCE:
        pays = formater_nom_ville(adresse.pays)

    complement = adresse.complement_localisation.strip() if adresse.complement_localisation else ""
    return ", ".join(p for p in (voie, complement, commune, pays) if p)
