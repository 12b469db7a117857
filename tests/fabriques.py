# tests/fabriques.py
from __future__ import annotations

from decimal import Decimal

from mention_legale.domain.entreprise.entities import (
    Adresse,
    DescriptionPersonne,
    EntrepriseRecord,
    EntrepriseRepresentante,
    PersonneMorale,
    PersonnePhysique,
    Pouvoir,
)
from mention_legale.domain.entreprise.exceptions import EntrepriseIntrouvable, RegistreErreur
from mention_legale.domain.entreprise.value_objects import Siren


class RegistreEnMemoire:
    """Registre de test: records par SIREN, erreurs programmables, appels traces."""

    def __init__(self, records: dict[str, EntrepriseRecord] | None = None) -> None:
        self.records = dict(records or {})
        self.erreurs: dict[str, RegistreErreur] = {}
        self.appels: list[str] = []

    async def obtenir(self, siren: Siren) -> EntrepriseRecord:
        self.appels.append(siren.valeur)
        if siren.valeur in self.erreurs:
            raise self.erreurs[siren.valeur]
        if siren.valeur not in self.records:
            raise EntrepriseIntrouvable(siren.valeur)
        return self.records[siren.valeur]


def personne(prenom: str, nom: str, genre: str | None = None) -> DescriptionPersonne:
    return DescriptionPersonne(nom=nom, prenoms=(prenom,), code_genre=genre)


def pouvoir_personne(role: str, prenom: str, nom: str, genre: str | None = None) -> Pouvoir:
    return Pouvoir(role_code=role, individu=personne(prenom, nom, genre))


def pouvoir_holding(role: str, denomination: str, siren: str | None) -> Pouvoir:
    return Pouvoir(role_code=role, entreprise=EntrepriseRepresentante(denomination=denomination, identifiant=siren))


def societe(
    siren: str,
    denomination: str,
    composition: tuple[Pouvoir, ...] | None = (),
    capital: str | None = "10000",
    code_forme: str | None = "5499",
) -> EntrepriseRecord:
    return EntrepriseRecord(
        siren=siren,
        code_forme_juridique=code_forme,
        personne_morale=PersonneMorale(
            denomination=denomination,
            montant_capital=Decimal(capital) if capital is not None else None,
            adresse=Adresse(
                numero_voie="123",
                type_voie="RUE",
                libelle_voie="de la Paix",
                code_postal="75001",
                commune="PARIS",
                pays="FRANCE",
            ),
            composition=composition,
        ),
    )


def entrepreneur(siren: str = "987654321", genre: str | None = "2") -> EntrepriseRecord:
    return EntrepriseRecord(
        siren=siren,
        code_forme_juridique="1000",
        personne_physique=PersonnePhysique(
            description=DescriptionPersonne(
                nom="Martin",
                prenoms=("Claire", "Anne"),
                code_genre=genre,
                date_naissance="1985-03-12",
                lieu_naissance="Lyon",
                nationalite="française",
            ),
            adresse_entreprise=Adresse(numero_voie="8", type_voie="AV", libelle_voie="Foch", code_postal="69006", commune="LYON"),
        ),
    )


FILIALE = "123456789"
HOLDING = "552100554"
ENTREPRENEUR = "987654321"


def registre_demo() -> RegistreEnMemoire:
    """Une filiale presidee par une holding, elle-meme presidee par une personne, et un entrepreneur."""
    return RegistreEnMemoire(
        {
            FILIALE: societe(FILIALE, "Filiale SARL", (pouvoir_holding("5132", "Holding SAS", HOLDING),)),
            HOLDING: societe(HOLDING, "Holding SAS", (pouvoir_personne("5132", "Marie", "Curie", "2"),)),
            ENTREPRENEUR: entrepreneur(ENTREPRENEUR),
        }
    )
