# mention_legale/domain/mention/gabarit.py
#
# Template renderer. The grammar has a single construct, the placeholder
# {{ name }} (name made of [A-Za-z0-9_], optional inner whitespace). No
# conditionals, loops or nesting. An unknown name renders as the empty string.
from __future__ import annotations

import re
from collections.abc import Mapping

from mention_legale.domain.entreprise.value_objects import Langue, TypeEntreprise

_PLACEHOLDER = re.compile(r"{{\s*([a-zA-Z0-9_]+)\s*}}")

_PERSONNE_MORALE_FR = "\n".join(
    (
        "**La société {{company_name}}**",
        "",
        "{{share_capital_line}}",
        "{{registration_line}}",
        "{{head_office_line}}",
        "",
        "{{representative_line}}",
    )
)

_PERSONNE_MORALE_EN = "\n".join(
    (
        "{{company_header}}",
        "{{share_capital_line}}",
        "{{head_office_line}}",
        "{{registration_line}}",
        "{{representative_line}}",
    )
)

_PERSONNE_PHYSIQUE_FR = "\n".join(
    (
        "{{civility}} {{full_name}}",
        "{{birth_statement}}",
        "{{nationality_line}}",
        "{{personal_address_line}}",
        "N° : {{siren_formatted}}",
    )
)

_PERSONNE_PHYSIQUE_EN = "\n".join(
    (
        "{{civility}} {{full_name}}",
        "{{birth_statement}}",
        "{{nationality_line}}",
        "{{personal_address_line}}",
        "No.: {{siren_formatted}}",
    )
)

GABARITS_PAR_DEFAUT: dict[tuple[TypeEntreprise, Langue], str] = {
    (TypeEntreprise.PERSONNE_MORALE, Langue.FR): _PERSONNE_MORALE_FR,
    (TypeEntreprise.PERSONNE_MORALE, Langue.EN): _PERSONNE_MORALE_EN,
    (TypeEntreprise.PERSONNE_PHYSIQUE, Langue.FR): _PERSONNE_PHYSIQUE_FR,
    (TypeEntreprise.PERSONNE_PHYSIQUE, Langue.EN): _PERSONNE_PHYSIQUE_EN,
}


def gabarit_par_defaut(type_entreprise: TypeEntreprise, langue: Langue) -> str:
    return GABARITS_PAR_DEFAUT[(type_entreprise, langue)]


def rendre_gabarit(gabarit: str, variables: Mapping[str, str]) -> str:
    return _PLACEHOLDER.sub(lambda m: variables.get(m.group(1), ""), gabarit)
