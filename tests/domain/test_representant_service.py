from fabriques import pouvoir_holding, pouvoir_personne

from mention_legale.domain import valeurs_par_defaut
from mention_legale.domain.entreprise.entities import EntrepriseRepresentante, Pouvoir
from mention_legale.domain.entreprise.value_objects import Genre, Siren
from mention_legale.domain.representation.services import (
    extraire_siren,
    resoudre_representant,
    selectionner_pouvoir,
)


def test_president_toujours_retenu():
    composition = [
        pouvoir_personne("51", "Jean", "Dupont"),
        pouvoir_personne("5132", "Paul", "President"),
    ]
    rep = resoudre_representant(composition)
    assert rep.nom == "Paul PRESIDENT"
    assert rep.role == "Président"
    assert rep.role_anglais == "President"
    assert rep.est_holding is False


def test_code_73_est_aussi_president():
    composition = [pouvoir_personne("30", "Anne", "Gerant"), pouvoir_personne("73", "Luc", "Chef")]
    assert resoudre_representant(composition).nom == "Luc CHEF"


def test_premier_president_dans_l_ordre_d_entree():
    composition = [pouvoir_personne("73", "Premier", "A"), pouvoir_personne("5132", "Second", "B")]
    assert resoudre_representant(composition).nom == "Premier A"


def test_sans_president_ordre_de_priorite():
    composition = [
        pouvoir_personne("53", "Dir", "General"),
        pouvoir_personne("30", "Gil", "Gerant"),
        pouvoir_personne("51", "Pierre", "Conseil"),
    ]
    rep = resoudre_representant(composition)
    assert rep.nom == "Pierre CONSEIL"
    assert rep.role == "Président du conseil d'administration"


def test_roles_inconnus_en_dernier():
    composition = [pouvoir_personne("99", "Liqui", "Dateur"), pouvoir_personne("53", "Dir", "General")]
    assert resoudre_representant(composition).role_code == "53"


def test_roles_inconnus_gardent_l_ordre_d_entree():
    composition = [pouvoir_personne("99", "Premier", "X"), pouvoir_personne("65", "Second", "Y")]
    assert selectionner_pouvoir(composition).individu.nom == "X"  # type: ignore[union-attr]


def test_composition_non_modifiee():
    composition = [pouvoir_personne("53", "A", "A"), pouvoir_personne("30", "B", "B")]
    copie = list(composition)
    resoudre_representant(composition)
    assert composition == copie


def test_composition_vide_ou_absente_donne_le_representant_par_defaut():
    for composition in (None, [], ()):
        rep = resoudre_representant(composition)
        assert rep.par_defaut is True
        assert rep.nom == valeurs_par_defaut.NOM_REPRESENTANT
        assert rep.role == valeurs_par_defaut.QUALITE_REPRESENTANT
        assert rep.genre is None
        assert rep.est_holding is False


def test_pouvoir_sans_personne_ni_entreprise_donne_le_defaut():
    assert resoudre_representant([Pouvoir(role_code="5132")]).par_defaut is True


def test_genre_du_representant():
    assert resoudre_representant([pouvoir_personne("30", "Marie", "Curie", "2")]).genre is Genre.F
    assert resoudre_representant([pouvoir_personne("30", "Jean", "Dupont", "1")]).genre is Genre.M
    assert resoudre_representant([pouvoir_personne("30", "Sam", "Doe")]).genre is None


def test_code_role_inconnu_donne_le_libelle_de_substitution():
    rep = resoudre_representant([pouvoir_personne("4242", "Sam", "Doe")])
    assert rep.role == valeurs_par_defaut.QUALITE_REPRESENTANT
    assert rep.role_anglais is None


def test_representant_personne_morale_est_une_holding():
    rep = resoudre_representant([pouvoir_holding("5132", "Holding SAS", "552100554")])
    assert rep.est_holding is True
    assert rep.nom == "Holding SAS"
    assert rep.role == "Président"
    assert rep.genre is None
    assert rep.siren_holding == Siren("552100554")
    assert rep.representant_holding is None


def test_holding_avec_identifiant_mal_forme():
    rep = resoudre_representant([pouvoir_holding("5132", "Holding SAS", "RCS Paris B")])
    assert rep.est_holding is True
    assert rep.siren_holding is None


def test_holding_sans_denomination_donne_le_defaut():
    assert resoudre_representant([pouvoir_holding("5132", "  ", "552100554")]).par_defaut is True


def test_extraire_siren():
    assert extraire_siren(EntrepriseRepresentante("H", "552 100 554")) == Siren("552100554")
    assert extraire_siren(EntrepriseRepresentante("H", None)) is None
    assert extraire_siren(EntrepriseRepresentante("H", "123")) is None
