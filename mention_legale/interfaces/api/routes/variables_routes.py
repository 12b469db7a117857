# mention_legale/interfaces/api/routes/variables_routes.py
from fastapi import APIRouter

from mention_legale.application.dtos.mention_dto import VariablesDTO
from mention_legale.domain.mention.variables import VARIABLES_DISPONIBLES

router = APIRouter()


@router.get("/variables", response_model=VariablesDTO)
def get_variables() -> VariablesDTO:
    return VariablesDTO(groupes={groupe: list(noms) for groupe, noms in VARIABLES_DISPONIBLES.items()})
