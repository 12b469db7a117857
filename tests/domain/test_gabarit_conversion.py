from mention_legale.domain.entreprise.value_objects import Langue, TypeEntreprise
from mention_legale.domain.mention.conversion import markdown_vers_html, markdown_vers_texte
from mention_legale.domain.mention.gabarit import gabarit_par_defaut, rendre_gabarit


def test_rendre_gabarit_substitue_les_noms_connus():
    assert rendre_gabarit("{{a}}-{{ b }}-{{c}}", {"a": "1", "b": "2"}) == "1-2-"


def test_rendre_gabarit_ignore_ce_qui_n_est_pas_un_placeholder():
    assert rendre_gabarit("{a} {{ a-b }} {{}}", {"a": "1"}) == "{a} {{ a-b }} {{}}"


def test_rendre_gabarit_n_interprete_pas_les_valeurs():
    """Une valeur contenant {{x}} n'est pas re-substituee."""
    assert rendre_gabarit("{{a}}", {"a": "{{b}}", "b": "2"}) == "{{b}}"


def test_gabarits_par_defaut():
    assert gabarit_par_defaut(TypeEntreprise.PERSONNE_MORALE, Langue.FR).startswith("**La société {{company_name}}**")
    assert gabarit_par_defaut(TypeEntreprise.PERSONNE_MORALE, Langue.EN).startswith("{{company_header}}")
    assert gabarit_par_defaut(TypeEntreprise.PERSONNE_PHYSIQUE, Langue.EN).endswith("No.: {{siren_formatted}}")


def test_markdown_vers_html():
    markdown = "**La société X**\n\nA *SARL* company\n"
    assert markdown_vers_html(markdown) == "<p><strong>La société X</strong></p><p>A <em>SARL</em> company</p>"


def test_markdown_vers_html_echappe_le_texte():
    assert markdown_vers_html("A & B <c>") == "<p>A &amp; B &lt;c&gt;</p>"


def test_markdown_vers_texte():
    assert markdown_vers_texte("  **A** et *b*\n") == "A et b"


def test_markdown_vers_texte_idempotent():
    texte = markdown_vers_texte("**Test Company SARL**,\nA Limited liability (*SARL*) company")
    assert markdown_vers_texte(texte) == texte
