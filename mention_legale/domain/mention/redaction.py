# mention_legale/domain/mention/redaction.py
#
# Synchronous paragraph builder: Company Record -> markdown, without walking
# holding chains. A corporate representative is rendered as holding-only
# unless the caller passes an already resolved representative (the async
# builder in the application layer does exactly that).
from __future__ import annotations

from mention_legale.domain import valeurs_par_defaut
from mention_legale.domain.entreprise.entities import EntrepriseRecord
from mention_legale.domain.entreprise.value_objects import Langue
from mention_legale.domain.representation.entities import RepresentantResolu

from .gabarit import gabarit_par_defaut, rendre_gabarit
from .variables import construire_variables


def construire_markdown(
    record: EntrepriseRecord,
    *,
    template: str | None = None,
    langue: Langue = Langue.FR,
    representant: RepresentantResolu | None = None,
) -> str:
    """template=None utilise le gabarit par defaut du type d'entreprise et de la langue."""
    type_entreprise = record.type
    if type_entreprise is None:
        return valeurs_par_defaut.AUCUNE_INFORMATION

    variables = construire_variables(record, representant, langue)
    gabarit = template if template is not None else gabarit_par_defaut(type_entreprise, langue)
    return rendre_gabarit(gabarit, variables)
