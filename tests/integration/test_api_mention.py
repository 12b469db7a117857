import pytest
from fabriques import ENTREPRENEUR, FILIALE, HOLDING, RegistreEnMemoire
from fastapi.testclient import TestClient

from mention_legale.domain.entreprise.exceptions import (
    AuthentificationRefusee,
    DonneesInvalides,
    RegistreIndisponible,
)
from mention_legale.infrastructure.config import get_settings


def test_mention_francaise_avec_chaine_de_holding(client: TestClient) -> None:
    response = client.get(f"/api/entreprises/{FILIALE}/mention")
    assert response.status_code == 200
    data = response.json()
    assert data["siren"] == FILIALE
    assert data["langue"] == "fr"
    assert data["type_entreprise"] == "personne_morale"
    assert data["markdown"].startswith("**La société Filiale SARL**")
    assert "elle-même représentée par Marie CURIE en tant que Président, dûment habilitée." in data["markdown"]
    assert data["html"].startswith("<p><strong>La société Filiale SARL</strong></p>")
    assert data["texte"].startswith("La société Filiale SARL")
    assert data["lien_pappers"] == f"https://www.pappers.fr/recherche?q={FILIALE}"


def test_mention_anglaise(client: TestClient) -> None:
    response = client.get(f"/api/entreprises/{FILIALE}/mention", params={"langue": "en"})
    assert response.status_code == 200
    data = response.json()
    assert data["langue"] == "en"
    assert data["markdown"].startswith("**Filiale SARL**,")
    assert "who warrants that she is duly authorized" in data["markdown"]


def test_siret_accepte(client: TestClient) -> None:
    response = client.get(f"/api/entreprises/{FILIALE}00012/mention")
    assert response.status_code == 200
    assert response.json()["siren"] == FILIALE


def test_entrepreneur_individuel(client: TestClient) -> None:
    response = client.get(f"/api/entreprises/{ENTREPRENEUR}/mention")
    assert response.status_code == 200
    data = response.json()
    assert data["type_entreprise"] == "personne_physique"
    assert data["markdown"].startswith("Madame Claire Martin")


def test_mentions_bilingues(client: TestClient) -> None:
    response = client.get(f"/api/entreprises/{FILIALE}/mentions")
    assert response.status_code == 200
    data = response.json()
    assert data["siren"] == FILIALE
    assert data["fr"]["langue"] == "fr"
    assert data["en"]["langue"] == "en"
    assert "Marie CURIE" in data["fr"]["markdown"]
    assert "Marie CURIE" in data["en"]["markdown"]


def test_gabarit_en_parametre(client: TestClient) -> None:
    response = client.get(
        f"/api/entreprises/{FILIALE}/mention",
        params={"template": "{{ company_name }} ({{siren}}) / {{holding_representative_name}}"},
    )
    assert response.status_code == 200
    assert response.json()["markdown"] == f"Filiale SARL ({FILIALE}) / Marie CURIE"


def test_gabarit_et_langue_de_la_configuration(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OUTPUT_TEMPLATE", "{{company_name}}\\n{{representative_name}}")
    monkeypatch.setenv("OUTPUT_LANGUAGE_DEFAULT", "en")
    get_settings.cache_clear()

    data = client.get(f"/api/entreprises/{FILIALE}/mention").json()

    assert data["langue"] == "en"
    assert data["markdown"] == "Filiale SARL\nHolding SAS"


@pytest.mark.parametrize("siren_raw", ["12345", "12AB56789", "1234567890"])
def test_siren_invalide_retourne_422(client: TestClient, siren_raw: str) -> None:
    response = client.get(f"/api/entreprises/{siren_raw}/mention")
    assert response.status_code == 422


def test_langue_inconnue_retourne_422(client: TestClient) -> None:
    response = client.get(f"/api/entreprises/{FILIALE}/mention", params={"langue": "de"})
    assert response.status_code == 422


def test_entreprise_inexistante_retourne_404(client: TestClient) -> None:
    response = client.get("/api/entreprises/999999999/mention")
    assert response.status_code == 404


@pytest.mark.parametrize(
    ("erreur", "statut"),
    [
        (RegistreIndisponible("timeout"), 503),
        (AuthentificationRefusee("refuse"), 502),
        (DonneesInvalides("json"), 502),
    ],
)
def test_erreurs_du_registre(
    client: TestClient, registre_api: RegistreEnMemoire, erreur: Exception, statut: int
) -> None:
    registre_api.erreurs[FILIALE] = erreur  # type: ignore[assignment]
    response = client.get(f"/api/entreprises/{FILIALE}/mention")
    assert response.status_code == statut


def test_holding_indisponible_degrade_sans_erreur(client: TestClient, registre_api: RegistreEnMemoire) -> None:
    registre_api.erreurs[HOLDING] = RegistreIndisponible("timeout")
    response = client.get(f"/api/entreprises/{FILIALE}/mention")
    assert response.status_code == 200
    assert response.json()["markdown"].endswith("Représentée aux fins des présentes par Holding SAS en tant que Président.")


def test_headers_de_securite(client: TestClient) -> None:
    response = client.get("/api/variables")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
