# mention_legale/application/dtos/mention_dto.py
from __future__ import annotations

from pydantic import BaseModel

from mention_legale.domain.entreprise.entities import EntrepriseRecord
from mention_legale.domain.entreprise.value_objects import Langue
from mention_legale.domain.mention.conversion import markdown_vers_html, markdown_vers_texte


class MentionDTO(BaseModel):
    siren: str
    langue: str          # "fr" | "en"
    type_entreprise: str | None = None   # "personne_morale" | "personne_physique"
    markdown: str
    html: str
    texte: str
    lien_pappers: str | None = None

    @classmethod
    def from_markdown(
        cls,
        record: EntrepriseRecord,
        langue: Langue,
        markdown: str,
        lien: str | None,
    ) -> MentionDTO:
        return cls(
            siren=record.siren,
            langue=langue.value,
            type_entreprise=record.type.value if record.type else None,
            markdown=markdown,
            html=markdown_vers_html(markdown),
            texte=markdown_vers_texte(markdown),
            lien_pappers=lien,
        )


class MentionsBilinguesDTO(BaseModel):
    siren: str
    fr: MentionDTO
    en: MentionDTO


class VariablesDTO(BaseModel):
    groupes: dict[str, list[str]]
