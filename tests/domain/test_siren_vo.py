import dataclasses

import pytest

from mention_legale.domain.entreprise.value_objects import Genre, Siren, genre_depuis_code


def test_siren_valide_sans_formatage():
    siren = Siren("123456789")
    assert siren.valeur == "123456789"
    assert str(siren) == "123456789"


def test_siren_formate_avec_espaces_insecables():
    assert Siren("123456789").formate == "123\u00a0456\u00a0789"


def test_siren_accepte_espaces_et_ponctuation():
    assert Siren("123 456 789").valeur == "123456789"
    assert Siren("123.456.789").valeur == "123456789"


def test_siret_reduit_aux_9_premiers_chiffres():
    """Un SIRET (14 chiffres) designe un etablissement; on garde le SIREN."""
    assert Siren("123 456 789 00012").valeur == "123456789"


def test_siren_comprimento_errado():
    with pytest.raises(ValueError, match="SIREN invalide"):
        Siren("12345")
    with pytest.raises(ValueError):
        Siren("1234567890")
    with pytest.raises(ValueError):
        Siren("")


def test_siren_rejette_les_lettres():
    with pytest.raises(ValueError, match="alphabetiques"):
        Siren("12345678A")


def test_siren_egalite_et_hash():
    assert Siren("123456789") == Siren("123 456 789")
    assert len({Siren("123456789"), Siren("12345678900012")}) == 1


def test_siren_immuable():
    siren = Siren("123456789")
    with pytest.raises(dataclasses.FrozenInstanceError):
        siren._valeur = "987654321"  # type: ignore[misc]


def test_genre_depuis_code():
    assert genre_depuis_code("2") is Genre.F
    assert genre_depuis_code("1") is Genre.M
    assert genre_depuis_code(None) is None
    assert genre_depuis_code("X") is None
