# mention_legale/domain/entreprise/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ESPACE_INSECABLE = "\u00a0"


@dataclass(frozen=True)
class Siren:
    """Value Object immuable pour le SIREN. Accepte aussi un SIRET (14 chiffres)
    et n'en garde que les 9 premiers chiffres."""

    _valeur: str  # toujours 9 chiffres sans formatage

    def __init__(self, raw: str) -> None:
        if any(c.isalpha() for c in raw):
            raise ValueError("SIREN invalide: caracteres alphabetiques")
        chiffres = "".join(c for c in raw if c.isdigit())
        if len(chiffres) == 14:
            chiffres = chiffres[:9]
        if len(chiffres) != 9:
            raise ValueError(f"SIREN invalide: {len(chiffres)} chiffres, attendu 9 (SIREN) ou 14 (SIRET)")
        object.__setattr__(self, "_valeur", chiffres)

    @property
    def valeur(self) -> str:
        """9 chiffres sans formatage."""
        return self._valeur

    @property
    def formate(self) -> str:
        """XXX XXX XXX, separateurs insecables."""
        d = self._valeur
        return f"{d[:3]}{ESPACE_INSECABLE}{d[3:6]}{ESPACE_INSECABLE}{d[6:]}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Siren):
            return NotImplemented
        return self._valeur == other._valeur

    def __hash__(self) -> int:
        return hash(self._valeur)

    def __repr__(self) -> str:
        return f"Siren({self._valeur!r})"

    def __str__(self) -> str:
        return self._valeur


class Langue(str, Enum):
    FR = "fr"
    EN = "en"


class Genre(str, Enum):
    M = "M"
    F = "F"


class TypeEntreprise(str, Enum):
    PERSONNE_MORALE = "personne_morale"
    PERSONNE_PHYSIQUE = "personne_physique"


def genre_depuis_code(code: str | None) -> Genre | None:
    """Code genre du registre: "2" -> F, "1" -> M, tout le reste -> inconnu."""
    if code == "2":
        return Genre.F
    if code == "1":
        return Genre.M
    return None
