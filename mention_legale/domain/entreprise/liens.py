# mention_legale/domain/entreprise/liens.py
from __future__ import annotations

from urllib.parse import quote

_PAPPERS_RECHERCHE = "https://www.pappers.fr/recherche?q="


def lien_pappers(
    siren: str | None = None,
    siret: str | None = None,
    denomination: str | None = None,
) -> str | None:
    """Lien de recherche Pappers a partir de l'identifiant le plus fiable:
    SIREN, puis SIRET, puis denomination."""
    requete = _chiffres(siren, 9) or _chiffres(siret, 14) or _texte(denomination)
    if requete is None:
        return None
    return _PAPPERS_RECHERCHE + quote(requete, safe="")


def _chiffres(valeur: str | None, longueur: int) -> str | None:
    if not valeur:
        return None
    chiffres = "".join(c for c in valeur if c.isdigit())
    return chiffres if len(chiffres) == longueur else None


def _texte(valeur: str | None) -> str | None:
    if not valeur:
        return None
    stripped = valeur.strip()
    return stripped or None
