# mention_legale/domain/mention/formes_juridiques.py
#
# INSEE legal-form codes ("catégorie juridique", level III) to labels.
#
# Design decisions:
#   - Exact level III code first, then the level II category (first two
#     digits), then the empty string. An unknown form never blocks rendering.
#   - The English label is derived from the French label, not from the code,
#     so a label typed by hand still gets translated. Prefixes are tested in
#     order: the most specific prefix must come first.
from __future__ import annotations

FORMES_JURIDIQUES: dict[str, str] = {
    "1000": "Entrepreneur individuel",
    "5202": "Société en nom collectif (SNC)",
    "5306": "Société en commandite simple (SCS)",
    "5308": "Société en commandite par actions (SCA)",
    "5385": "Société d'exercice libéral en commandite par actions (SELCA)",
    "5458": "Société coopérative ouvrière de production (SCOP) à responsabilité limitée",
    "5485": "Société d'exercice libéral à responsabilité limitée (SELARL)",
    "5498": "Entreprise unipersonnelle à responsabilité limitée (EURL)",
    "5499": "Société à responsabilité limitée (SARL)",
    "5599": "Société anonyme à conseil d'administration (SA)",
    "5699": "Société anonyme à directoire (SA)",
    "5710": "Société par actions simplifiée (SAS)",
    "5720": "Société par actions simplifiée unipersonnelle (SASU)",
    "5785": "Société d'exercice libéral par actions simplifiée (SELAS)",
    "6540": "Société civile immobilière (SCI)",
    "6585": "Société civile professionnelle (SCP)",
    "6599": "Société civile",
    "9220": "Association déclarée",
}

CATEGORIES_JURIDIQUES: dict[str, str] = {
    "10": "Entrepreneur individuel",
    "52": "Société en nom collectif (SNC)",
    "53": "Société en commandite",
    "54": "Société à responsabilité limitée (SARL)",
    "55": "Société anonyme à conseil d'administration (SA)",
    "56": "Société anonyme à directoire (SA)",
    "57": "Société par actions simplifiée (SAS)",
    "65": "Société civile",
    "92": "Association",
}

_LIBELLES_ANGLAIS: tuple[tuple[str, str], ...] = (
    ("Société d'exercice libéral à responsabilité limitée", "Professional limited liability"),
    ("Société d'exercice libéral par actions simplifiée", "Professional simplified joint-stock"),
    ("Société d'exercice libéral en commandite par actions", "Professional partnership limited by shares"),
    ("Société coopérative ouvrière de production", "Workers' cooperative limited liability"),
    ("Entreprise unipersonnelle à responsabilité limitée", "Single-member limited liability"),
    ("Société à responsabilité limitée", "Limited liability"),
    ("Société par actions simplifiée unipersonnelle", "Single-shareholder simplified joint-stock"),
    ("Société par actions simplifiée", "Simplified joint-stock"),
    ("Société anonyme à directoire", "Public limited (management board)"),
    ("Société anonyme", "Public limited"),
    ("Société en nom collectif", "General partnership"),
    ("Société en commandite par actions", "Partnership limited by shares"),
    ("Société en commandite", "Limited partnership"),
    ("Société civile immobilière", "Real estate non-trading"),
    ("Société civile professionnelle", "Professional non-trading"),
    ("Société civile", "Non-trading"),
    ("Entrepreneur individuel", "Sole proprietorship"),
    ("Association", "Non-profit association"),
)


def libelle_forme_juridique(code: str | None) -> str:
    if not code:
        return ""
    code = code.strip()
    if code in FORMES_JURIDIQUES:
        return FORMES_JURIDIQUES[code]
    return CATEGORIES_JURIDIQUES.get(code[:2], "")


def libelle_forme_juridique_anglais(libelle_fr: str) -> str:
    """Libelle anglais; le libelle francais lui-meme si aucune traduction n'est connue."""
    if not libelle_fr:
        return ""
    for prefixe, anglais in _LIBELLES_ANGLAIS:
        if libelle_fr.startswith(prefixe):
            return anglais
    return libelle_fr
