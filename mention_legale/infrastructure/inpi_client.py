# mention_legale/infrastructure/inpi_client.py
#
# Company Data Provider backed by the INPI national company register (RNE).
#
# Design decisions:
#   - One httpx.AsyncClient per InpiRegistre, injectable for tests
#     (httpx.MockTransport). An injected client is never closed here.
#   - The SSO token is cached for the lifetime of the instance and refreshed
#     once when a read answers 401. A lock prevents the FR and EN renders from
#     logging in twice at the same time.
#   - Transient failures (timeouts, transport errors, 429, 5xx) are retried
#     with exponential backoff, then surface as RegistreIndisponible. Every
#     other answer is terminal and mapped to its own RegistreErreur. No httpx
#     exception leaves this module: an undecodable body is DonneesInvalides.
from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from mention_legale.domain.entreprise.entities import EntrepriseRecord
from mention_legale.domain.entreprise.exceptions import (
    AuthentificationRefusee,
    DonneesInvalides,
    EntrepriseIntrouvable,
    RegistreErreur,
    RegistreIndisponible,
)
from mention_legale.domain.entreprise.value_objects import Siren

from .inpi_mapper import entreprise_depuis_inpi

logger = logging.getLogger(__name__)

CODES_REESSAYABLES = frozenset({429, 500, 502, 503, 504})
CODES_AUTHENTIFICATION = frozenset({401, 403})


class InpiRegistre:
    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        timeout_seconds: float = 10.0,
        max_retries: int = 2,
        backoff_initial: float = 0.5,
        backoff_max: float = 4.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._username = username
        self._password = password
        self._max_retries = max_retries
        self._backoff_initial = backoff_initial
        self._backoff_max = backoff_max
        self._proprietaire = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout_seconds, connect=5.0))
        self._jeton: str | None = None
        self._verrou = asyncio.Lock()

    async def obtenir(self, siren: Siren) -> EntrepriseRecord:
        jeton = await self._obtenir_jeton()
        response = await self._lire_entreprise(siren, jeton)
        if response.status_code == 401:
            logger.info("Jeton INPI expire, nouvelle authentification")
            jeton = await self._obtenir_jeton(renouveler=jeton)
            response = await self._lire_entreprise(siren, jeton)

        if response.status_code in CODES_AUTHENTIFICATION:
            raise AuthentificationRefusee(f"INPI a refuse l'acces ({response.status_code})")
        if response.status_code == 404:
            raise EntrepriseIntrouvable(siren.valeur)
        if response.is_error:
            raise RegistreErreur(f"Reponse INPI inattendue: HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as err:
            raise DonneesInvalides("Reponse INPI non JSON") from err
        return entreprise_depuis_inpi(payload)

    async def fermer(self) -> None:
        if self._proprietaire:
            await self._client.aclose()

    async def _lire_entreprise(self, siren: Siren, jeton: str) -> httpx.Response:
        return await self._requete(
            "GET",
            f"/api/companies/{siren.valeur}",
            headers={"Authorization": f"Bearer {jeton}"},
        )

    async def _obtenir_jeton(self, renouveler: str | None = None) -> str:
        """Jeton en cache; `renouveler` designe le jeton refuse a remplacer."""
        async with self._verrou:
            if self._jeton is not None and self._jeton != renouveler:
                return self._jeton
            self._jeton = await self._connexion()
            return self._jeton

    async def _connexion(self) -> str:
        if not self._username or not self._password:
            raise AuthentificationRefusee("Identifiants INPI absents (INPI_USERNAME / INPI_PASSWORD)")

        response = await self._requete(
            "POST",
            "/api/sso/login",
            json={"username": self._username, "password": self._password},
        )
        if response.status_code in CODES_AUTHENTIFICATION:
            raise AuthentificationRefusee("Identifiants INPI refuses")
        if response.is_error:
            raise RegistreErreur(f"Connexion INPI: HTTP {response.status_code}")

        try:
            jeton = response.json().get("token")
        except (ValueError, AttributeError) as err:
            raise DonneesInvalides("Reponse de connexion INPI illisible") from err
        if not jeton:
            raise AuthentificationRefusee("Connexion INPI sans jeton")
        return str(jeton)

    async def _requete(self, methode: str, chemin: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{chemin}"
        derniere_erreur = ""
        for tentative in range(self._max_retries + 1):
            try:
                response = await self._client.request(methode, url, **kwargs)
            except httpx.TransportError as err:
                derniere_erreur = f"{type(err).__name__}: {err}"
            except httpx.DecodingError as err:
                raise DonneesInvalides(f"Reponse INPI illisible ({methode} {chemin}): {err}") from err
            except httpx.RequestError as err:
                raise RegistreErreur(f"Requete INPI en echec ({methode} {chemin}): {type(err).__name__}: {err}") from err
            else:
                if response.status_code not in CODES_REESSAYABLES:
                    return response
                derniere_erreur = f"HTTP {response.status_code}"

            if tentative < self._max_retries:
                delai = min(self._backoff_initial * (2**tentative), self._backoff_max)
                logger.info(
                    "INPI %s %s: %s, nouvelle tentative %d/%d dans %.1fs",
                    methode,
                    chemin,
                    derniere_erreur,
                    tentative + 1,
                    self._max_retries,
                    delai,
                )
                await asyncio.sleep(delai)

        raise RegistreIndisponible(f"INPI indisponible ({methode} {chemin}): {derniere_erreur}")
