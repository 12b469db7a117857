# mention_legale/domain/representation/roles.py
#
# Role registry: registry role codes ("roleEntreprise") to human labels.
#
# Design decisions:
#   - Labels are module constants, like the other lookup tables of the domain.
#     Only the roles that can act as a company's legal representative or that
#     commonly appear next to them are listed.
#   - The English label is resolved by code first; the free-text table
#     (French label -> English label) exists for labels that reached us without
#     a code. Accents and case are ignored on that secondary lookup.
from __future__ import annotations

import unicodedata

from mention_legale.domain import valeurs_par_defaut

ROLES_FR: dict[str, str] = {
    "29": "Gérant et associé",
    "30": "Gérant",
    "40": "Associé indéfiniment responsable",
    "41": "Associé unique",
    "51": "Président du conseil d'administration",
    "52": "Président du directoire",
    "53": "Directeur général",
    "55": "Directeur général unique",
    "56": "Membre du directoire",
    "57": "Président du conseil de surveillance",
    "63": "Membre du conseil de surveillance",
    "65": "Administrateur",
    "71": "Commissaire aux comptes titulaire",
    "72": "Commissaire aux comptes suppléant",
    "73": "Président",
    "74": "Directeur général délégué",
    "99": "Liquidateur",
    "5131": "Président du conseil d'administration",
    "5132": "Président",
    "5141": "Directeur général",
    "5142": "Directeur général délégué",
}

ROLES_EN: dict[str, str] = {
    "29": "Managing Partner",
    "30": "Manager",
    "40": "Partner with unlimited liability",
    "41": "Sole Shareholder",
    "51": "Chairman of the Board of Directors",
    "52": "Chairman of the Management Board",
    "53": "Chief Executive Officer",
    "55": "Sole Chief Executive Officer",
    "56": "Member of the Management Board",
    "57": "Chairman of the Supervisory Board",
    "63": "Member of the Supervisory Board",
    "65": "Director",
    "71": "Statutory Auditor",
    "72": "Alternate Statutory Auditor",
    "73": "President",
    "74": "Deputy Chief Executive Officer",
    "99": "Liquidator",
    "5131": "Chairman of the Board of Directors",
    "5132": "President",
    "5141": "Chief Executive Officer",
    "5142": "Deputy Chief Executive Officer",
}


def _cle(libelle: str) -> str:
    decompose = unicodedata.normalize("NFKD", libelle)
    sans_accents = "".join(c for c in decompose if not unicodedata.combining(c))
    return " ".join(sans_accents.lower().replace("’", "'").split())


# Derived from the two code tables, plus the spellings seen in free text.
_ROLES_FR_VERS_EN: dict[str, str] = {
    **{_cle(ROLES_FR[code]): ROLES_EN[code] for code in ROLES_FR},
    _cle("Présidente"): "President",
    _cle("Gérante"): "Manager",
    _cle("Directrice générale"): "Chief Executive Officer",
    _cle("Directrice générale déléguée"): "Deputy Chief Executive Officer",
    _cle("Co-gérant"): "Co-Manager",
    _cle("PDG"): "Chairman and Chief Executive Officer",
    _cle("Président-directeur général"): "Chairman and Chief Executive Officer",
}


def libelle_role(code: str | None) -> str:
    """Libelle francais du role, ou le libelle de substitution si le code est inconnu."""
    if code and code in ROLES_FR:
        return ROLES_FR[code]
    return valeurs_par_defaut.QUALITE_REPRESENTANT


def libelle_role_anglais_par_code(code: str | None) -> str | None:
    if not code:
        return None
    return ROLES_EN.get(code)


def libelle_role_anglais(libelle_fr: str | None) -> str | None:
    """Recherche secondaire par libelle francais libre."""
    if not libelle_fr:
        return None
    return _ROLES_FR_VERS_EN.get(_cle(libelle_fr))


def resoudre_role_anglais(
    libelle_fr: str | None,
    code: str | None,
    libelle_explicite: str | None,
) -> str:
    """Precedence: libelle anglais explicite, puis code, puis libelle francais,
    puis libelle de substitution."""
    if libelle_explicite and libelle_explicite != valeurs_par_defaut.QUALITE_REPRESENTANT:
        return libelle_explicite
    par_code = libelle_role_anglais_par_code(code)
    if par_code:
        return par_code
    par_libelle = libelle_role_anglais(libelle_fr)
    if par_libelle:
        return par_libelle
    return valeurs_par_defaut.QUALITE_REPRESENTANT
