# mention_legale/domain/entreprise/exceptions.py
#
# Error taxonomy of the company registry (Company Data Provider).
#
# Design decisions:
#   - Every provider failure is a RegistreErreur so that the holding-chain walk
#     can recover from all of them with a single except clause.
#   - `retryable` lets the HTTP layer distinguish transient outages (503) from
#     terminal answers (404, 502) without isinstance ladders.
from __future__ import annotations


class RegistreErreur(Exception):
    """Erreur generique du registre des entreprises."""

    retryable: bool = False


class EntrepriseIntrouvable(RegistreErreur):
    """SIREN bien forme mais inconnu du registre."""

    def __init__(self, siren: str) -> None:
        super().__init__(f"Entreprise introuvable: {siren}")
        self.siren = siren


class RegistreIndisponible(RegistreErreur):
    """Timeout, 429 ou 5xx apres epuisement des tentatives."""

    retryable = True


class AuthentificationRefusee(RegistreErreur):
    """Identifiants absents ou refuses par le registre."""


class DonneesInvalides(RegistreErreur):
    """Reponse du registre impossible a interpreter."""
