# mention_legale/domain/representation/entities.py
from __future__ import annotations

from dataclasses import dataclass

from mention_legale.domain.entreprise.value_objects import Genre, Siren


@dataclass(frozen=True)
class RepresentantResolu:
    """Representant retenu pour la mention.

    Invariants:
      - representant_holding (la "queue" de la chaine) n'existe que si
        est_holding est vrai, et n'a jamais elle-meme de queue.
      - siren_holding n'est renseigne que pour une holding.
      - par_defaut marque le representant de substitution (aucun pouvoir
        exploitable): ce n'est pas une personne physique.
    """

    nom: str
    role: str
    role_code: str | None = None
    role_anglais: str | None = None
    genre: Genre | None = None
    est_holding: bool = False
    siren_holding: Siren | None = None
    representant_holding: RepresentantResolu | None = None
    par_defaut: bool = False

    def __post_init__(self) -> None:
        if self.representant_holding is not None:
            if not self.est_holding:
                raise ValueError("Seule une holding peut porter un representant de holding")
            if self.representant_holding.representant_holding is not None:
                raise ValueError("La chaine de holding est aplatie a un seul niveau")
        if self.siren_holding is not None and not self.est_holding:
            raise ValueError("siren_holding reserve aux holdings")

    @property
    def est_personne_physique(self) -> bool:
        return not self.est_holding and not self.par_defaut
