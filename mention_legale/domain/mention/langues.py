# mention_legale/domain/mention/langues.py
#
# Sentence skeletons of the legal paragraph, one table per output language.
#
# Design decisions:
#   - Each language is a RedactionLangue: a frozen bundle of pure functions
#     keyed by the same slot names. The variable builder never branches on the
#     language; it looks the table up in REDACTIONS and calls the slots.
#   - Sentences are fixed skeletons. Each slot receives both the French and the
#     English role label and picks the one its language displays.
#   - Gender agreement is resolved once per referent into an Accord (pronoun,
#     verb, participle). Unknown gender takes the masculine form. A company
#     referent uses accord_societe.
#   - Amounts: French "10 000,00 €" with U+00A0 before the symbol, English
#     "€10,000.00" with the symbol first.
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal

from mention_legale.domain.entreprise.value_objects import ESPACE_INSECABLE, Genre, Langue

from .formatage import formater_nombre_anglais, formater_nombre_francais


@dataclass(frozen=True)
class Accord:
    pronom: str
    verbe: str
    participe: str


@dataclass(frozen=True)
class RedactionLangue:
    entete: Callable[[str], str]
    ligne_capital: Callable[[str, str, str], str]
    ligne_immatriculation: Callable[[str, str], str]
    ligne_siege: Callable[[str], str]
    ligne_representant: Callable[[str, str, str, Accord], str]
    ligne_holding: Callable[[str, str, str, Accord], str]
    ligne_holding_avec_representant: Callable[[str, str, str, str, str, str, Accord], str]
    ordre_details: Callable[[str, str, str], tuple[str, ...]]
    formater_montant: Callable[[Decimal], str]
    formater_capital: Callable[[str], str]
    accord: Callable[[Genre | None], Accord]
    accord_societe: Accord
    civilite: Callable[[Genre | None], str]
    mot_ne: Callable[[Genre | None], str]
    declaration_naissance: Callable[[str, str, str], str]
    ligne_nationalite: Callable[[str], str]
    ligne_adresse: Callable[[str], str]
    libelle_numero: str


def _accord_fr(genre: Genre | None) -> Accord:
    if genre is Genre.F:
        return Accord(pronom="elle", verbe="est", participe="habilitée")
    return Accord(pronom="il", verbe="est", participe="habilité")


def _accord_en(genre: Genre | None) -> Accord:
    if genre is Genre.F:
        return Accord(pronom="she", verbe="is", participe="authorized")
    return Accord(pronom="he", verbe="is", participe="authorized")


FRANCAIS = RedactionLangue(
    entete=lambda denomination: f"**La société {denomination}**",
    ligne_capital=lambda forme_fr, forme_en, capital: f"{forme_fr} au capital de {capital}",
    ligne_immatriculation=lambda ville, siren: f"Immatriculée au RCS de {ville} sous le n° {siren}",
    ligne_siege=lambda adresse: f"Dont le siège social est situé {adresse}",
    ligne_representant=lambda nom, role_fr, role_en, accord: (
        f"Représentée aux fins des présentes par {nom} en sa qualité de {role_fr}, dûment {accord.participe}."
    ),
    ligne_holding=lambda nom, role_fr, role_en, accord: (
        f"Représentée aux fins des présentes par {nom} en tant que {role_fr}."
    ),
    ligne_holding_avec_representant=lambda holding, role_fr, role_en, nom, role2_fr, role2_en, accord: (
        f"Représentée aux fins des présentes par la société {holding} en tant que {role_fr}, "
        f"elle-même représentée par {nom} en tant que {role2_fr}, dûment {accord.participe}."
    ),
    ordre_details=lambda capital, immatriculation, siege: (capital, immatriculation, siege),
    formater_montant=formater_nombre_francais,
    formater_capital=lambda montant: f"{montant}{ESPACE_INSECABLE}€",
    accord=_accord_fr,
    accord_societe=Accord(pronom="elle", verbe="est", participe="habilitée"),
    civilite=lambda genre: "Madame" if genre is Genre.F else "Monsieur",
    mot_ne=lambda genre: "Née" if genre is Genre.F else "Né",
    declaration_naissance=lambda ne, date, lieu: f"{ne} le {date} à {lieu}",
    ligne_nationalite=lambda nationalite: f"De nationalité {nationalite}",
    ligne_adresse=lambda adresse: f"Demeurant {adresse}",
    libelle_numero="N° : ",
)

_AUTORISATION = "duly authorized for the purposes herein set out,"

ANGLAIS = RedactionLangue(
    entete=lambda denomination: f"**{denomination}**,",
    ligne_capital=lambda forme_fr, forme_en, capital: (
        f"A {forme_en} (*{forme_fr}*) company, with a share capital of {capital},"
    ),
    ligne_immatriculation=lambda ville, siren: (
        f"Registered under number {siren} with the {ville} Trade and Companies Register,"
    ),
    ligne_siege=lambda adresse: f"Having its head office located at {adresse},",
    ligne_representant=lambda nom, role_fr, role_en, accord: (
        f"Represented by {nom}, its {role_en}, who warrants that {accord.pronom} {accord.verbe} {_AUTORISATION}"
    ),
    ligne_holding=lambda nom, role_fr, role_en, accord: (
        f"Represented by the company {nom}, its {role_en}, which warrants that "
        f"{accord.pronom} {accord.verbe} {_AUTORISATION}"
    ),
    ligne_holding_avec_representant=lambda holding, role_fr, role_en, nom, role2_fr, role2_en, accord: (
        f"Represented by the company {holding}, its {role_en}, itself represented by {nom}, {role2_en}, "
        f"who warrants that {accord.pronom} {accord.verbe} {_AUTORISATION}"
    ),
    ordre_details=lambda capital, immatriculation, siege: (capital, siege, immatriculation),
    formater_montant=formater_nombre_anglais,
    formater_capital=lambda montant: f"€{montant}",
    accord=_accord_en,
    accord_societe=Accord(pronom="it", verbe="is", participe="authorized"),
    civilite=lambda genre: "Ms." if genre is Genre.F else "Mr.",
    mot_ne=lambda genre: "Born",
    declaration_naissance=lambda ne, date, lieu: f"{ne} on {date} in {lieu}",
    ligne_nationalite=lambda nationalite: f"Of {nationalite} nationality",
    ligne_adresse=lambda adresse: f"Residing at {adresse}",
    libelle_numero="No.: ",
)

REDACTIONS: dict[Langue, RedactionLangue] = {
    Langue.FR: FRANCAIS,
    Langue.EN: ANGLAIS,
}
