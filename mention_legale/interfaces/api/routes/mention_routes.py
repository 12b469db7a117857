# mention_legale/interfaces/api/routes/mention_routes.py
from fastapi import APIRouter, Depends, HTTPException, Query

from mention_legale.application.dtos.mention_dto import MentionDTO, MentionsBilinguesDTO
from mention_legale.application.services.mention_service import MentionService
from mention_legale.domain.entreprise.exceptions import (
    AuthentificationRefusee,
    EntrepriseIntrouvable,
    RegistreErreur,
)
from mention_legale.domain.entreprise.value_objects import Langue, Siren
from mention_legale.infrastructure.config import Settings
from mention_legale.interfaces.api.dependencies import get_app_settings, get_mention_service

router = APIRouter()


def _siren(siren_raw: str) -> Siren:
    try:
        return Siren(siren_raw)
    except ValueError as err:
        raise HTTPException(status_code=422, detail="SIREN invalide") from err


def _template(template: str | None, settings: Settings) -> str | None:
    """Gabarit de la requete, sinon celui de la configuration, sinon None (defaut)."""
    if template is not None and template.strip():
        return template
    return settings.output_template


def _http_erreur(err: RegistreErreur) -> HTTPException:
    if isinstance(err, EntrepriseIntrouvable):
        return HTTPException(status_code=404, detail="Entreprise introuvable")
    if isinstance(err, AuthentificationRefusee):
        return HTTPException(status_code=502, detail="Acces au registre refuse")
    if err.retryable:
        return HTTPException(status_code=503, detail="Registre temporairement indisponible")
    return HTTPException(status_code=502, detail="Reponse du registre inexploitable")


@router.get("/entreprises/{siren_raw}/mention", response_model=MentionDTO)
async def get_mention(
    siren_raw: str,
    langue: Langue | None = Query(default=None),
    template: str | None = Query(default=None, max_length=5000),
    service: MentionService = Depends(get_mention_service),  # noqa: B008
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> MentionDTO:
    siren = _siren(siren_raw)
    try:
        return await service.obtenir_mention(
            siren,
            langue=langue or settings.output_language_default,
            template=_template(template, settings),
        )
    except RegistreErreur as err:
        raise _http_erreur(err) from err


@router.get("/entreprises/{siren_raw}/mentions", response_model=MentionsBilinguesDTO)
async def get_mentions_bilingues(
    siren_raw: str,
    template: str | None = Query(default=None, max_length=5000),
    service: MentionService = Depends(get_mention_service),  # noqa: B008
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> MentionsBilinguesDTO:
    siren = _siren(siren_raw)
    try:
        return await service.obtenir_mentions_bilingues(siren, template=_template(template, settings))
    except RegistreErreur as err:
        raise _http_erreur(err) from err
