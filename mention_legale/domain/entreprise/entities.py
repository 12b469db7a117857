# mention_legale/domain/entreprise/entities.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .value_objects import TypeEntreprise


@dataclass(frozen=True)
class Adresse:
    """Adresse telle que declaree au registre. Tous les champs sont optionnels."""

    numero_voie: str | None = None
    indice_repetition: str | None = None
    type_voie: str | None = None
    libelle_voie: str | None = None
    complement_localisation: str | None = None
    code_postal: str | None = None
    commune: str | None = None
    pays: str | None = None


@dataclass(frozen=True)
class DescriptionPersonne:
    """Personne physique. code_genre est le code brut du registre ("1", "2" ou absent)."""

    nom: str | None = None
    prenoms: tuple[str, ...] = ()
    code_genre: str | None = None
    date_naissance: str | None = None
    lieu_naissance: str | None = None
    nationalite: str | None = None


@dataclass(frozen=True)
class EntrepriseRepresentante:
    """Personne morale titulaire d'un pouvoir. identifiant peut etre absent ou mal forme."""

    denomination: str
    identifiant: str | None = None


@dataclass(frozen=True)
class Pouvoir:
    """Une attribution de role: une personne physique OU une personne morale."""

    role_code: str | None
    individu: DescriptionPersonne | None = None
    entreprise: EntrepriseRepresentante | None = None

    def __post_init__(self) -> None:
        if self.individu is not None and self.entreprise is not None:
            raise ValueError("Pouvoir: individu et entreprise sont exclusifs")


@dataclass(frozen=True)
class PersonneMorale:
    denomination: str | None = None
    montant_capital: Decimal | None = None
    adresse: Adresse | None = None
    ville_immatriculation: str | None = None
    # None = composition absente du registre; () = composition vide
    composition: tuple[Pouvoir, ...] | None = None


@dataclass(frozen=True)
class PersonnePhysique:
    description: DescriptionPersonne | None = None
    adresse_personne: Adresse | None = None
    adresse_entreprise: Adresse | None = None


@dataclass(frozen=True)
class EntrepriseRecord:
    """Aggregate Root, immuable, construit a partir d'une seule lecture du registre.

    Invariant: au plus un des deux contenus (personne_morale, personne_physique)
    est renseigne. Aucun des deux = pas d'information a afficher.
    """

    siren: str
    code_forme_juridique: str | None = None
    personne_morale: PersonneMorale | None = None
    personne_physique: PersonnePhysique | None = None

    def __post_init__(self) -> None:
        if self.personne_morale is not None and self.personne_physique is not None:
            raise ValueError("EntrepriseRecord: personne_morale et personne_physique sont exclusives")

    @property
    def type(self) -> TypeEntreprise | None:
        if self.personne_physique is not None:
            return TypeEntreprise.PERSONNE_PHYSIQUE
        if self.personne_morale is not None:
            return TypeEntreprise.PERSONNE_MORALE
        return None
