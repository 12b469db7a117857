# mention_legale/domain/mention/conversion.py
#
# Post-processing of the rendered markdown for rich-text and plain-text
# clipboards. Only the two markers the templates emit are handled: **bold**
# and *italic*. Bold is converted first so that "**" is never read as two
# italic markers.
from __future__ import annotations

import html
import re

_GRAS = re.compile(r"\*\*(.*?)\*\*")
_ITALIQUE = re.compile(r"\*(.*?)\*")


def markdown_vers_html(markdown: str) -> str:
    """Chaque ligne non vide devient un <p>; texte echappe pour HTML."""
    texte = html.escape(markdown, quote=False)
    texte = _GRAS.sub(r"<strong>\1</strong>", texte)
    texte = _ITALIQUE.sub(r"<em>\1</em>", texte)
    return "".join(f"<p>{ligne.strip()}</p>" for ligne in texte.split("\n") if ligne.strip())


def markdown_vers_texte(markdown: str) -> str:
    texte = _GRAS.sub(r"\1", markdown)
    texte = _ITALIQUE.sub(r"\1", texte)
    return texte.strip()
