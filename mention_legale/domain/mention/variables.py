# mention_legale/domain/mention/variables.py
#
# Template variable builder: Company Record + resolved representative -> flat
# mapping of named strings, for one output language.
#
# Design decisions:
#   - Total function. Every name of VARIABLES_DISPONIBLES is present in the
#     result for every kind of company; names that do not apply to the kind
#     hold the empty string. Missing registry facts become the visible
#     placeholders of valeurs_par_defaut, never an exception.
#   - Exactly one representative sentence is produced per company: direct,
#     holding-only or holding-with-representative. The agreement (pronoun,
#     verb, participle) follows the natural person who acts: the direct
#     representative or the holding's own representative. A holding without a
#     known representative speaks as a company ("it is").
#   - English role labels are resolved independently for the representative
#     and for the holding's representative (resoudre_role_anglais).
#
# Invariants:
#   - set(construire_variables(...)) == set(noms_variables()) for any input.
from __future__ import annotations

from mention_legale.domain import valeurs_par_defaut
from mention_legale.domain.entreprise.entities import (
    DescriptionPersonne,
    EntrepriseRecord,
    PersonneMorale,
    PersonnePhysique,
)
from mention_legale.domain.entreprise.value_objects import Langue, TypeEntreprise, genre_depuis_code
from mention_legale.domain.representation.entities import RepresentantResolu
from mention_legale.domain.representation.roles import resoudre_role_anglais
from mention_legale.domain.representation.services import resoudre_representant

from .formatage import formater_adresse, formater_siren, valeur_ou_defaut
from .formes_juridiques import libelle_forme_juridique, libelle_forme_juridique_anglais
from .greffes import resoudre_ville_rcs
from .langues import REDACTIONS, Accord, RedactionLangue

DEVISE = "€"

VARIABLES_DISPONIBLES: dict[str, tuple[str, ...]] = {
    "commun": (
        "company_type",
        "siren",
        "siren_formatted",
        "company_name",
        "legal_form",
        "legal_form_english",
        "company_header",
        "company_details",
    ),
    "personne_morale": (
        "share_capital",
        "share_capital_raw",
        "share_capital_with_currency",
        "share_capital_line",
        "share_capital_currency",
        "rcs_city",
        "registration_line",
        "head_office_address",
        "head_office_line",
        "representative_name",
        "representative_role",
        "representative_role_english",
        "representative_gender",
        "representative_is_holding",
        "representative_line",
        "representative_pronoun",
        "representative_verb",
        "holding_representative_name",
        "holding_representative_role",
        "holding_representative_gender",
        "holding_representative_pronoun",
        "holding_representative_verb",
        "holding_representative_role_english",
    ),
    "personne_physique": (
        "civility",
        "first_name",
        "last_name",
        "full_name",
        "birth_date",
        "birth_place",
        "birth_statement",
        "ne_word",
        "nationality",
        "nationality_line",
        "personal_address",
        "personal_address_line",
        "representative_pronoun",
        "representative_verb",
    ),
}


def noms_variables() -> tuple[str, ...]:
    """Tous les noms de variables, sans doublon, dans l'ordre du catalogue."""
    return tuple(dict.fromkeys(nom for groupe in VARIABLES_DISPONIBLES.values() for nom in groupe))


def construire_variables(
    record: EntrepriseRecord,
    representant: RepresentantResolu | None,
    langue: Langue = Langue.FR,
) -> dict[str, str]:
    """representant n'est utilise que pour une personne morale. Absent, il est resolu
    depuis la composition, sans parcourir les holdings."""
    variables = dict.fromkeys(noms_variables(), "")
    redaction = REDACTIONS[langue]

    siren = record.siren
    forme = libelle_forme_juridique(record.code_forme_juridique)
    variables.update(
        siren=siren,
        siren_formatted=formater_siren(siren),
        legal_form=forme,
        legal_form_english=libelle_forme_juridique_anglais(forme),
        share_capital_currency=DEVISE,
    )

    if record.personne_physique is not None:
        variables.update(_variables_personne_physique(record.personne_physique, variables, redaction))
    elif record.personne_morale is not None:
        if representant is None:
            representant = resoudre_representant(record.personne_morale.composition)
        variables.update(_variables_personne_morale(record.personne_morale, representant, variables, redaction))
    return variables


def _variables_personne_morale(
    pm: PersonneMorale,
    representant: RepresentantResolu,
    communes: dict[str, str],
    redaction: RedactionLangue,
) -> dict[str, str]:
    manquante = valeurs_par_defaut.DONNEE_MANQUANTE
    denomination = valeur_ou_defaut(pm.denomination, manquante)

    if pm.montant_capital is None:
        capital_brut = capital = capital_avec_devise = manquante
    else:
        capital_brut = format(pm.montant_capital, "f")
        capital = redaction.formater_montant(pm.montant_capital)
        capital_avec_devise = redaction.formater_capital(capital)

    adresse = valeur_ou_defaut(formater_adresse(pm.adresse), valeurs_par_defaut.ADRESSE)
    ville_rcs = resoudre_ville_rcs(pm.adresse, pm.ville_immatriculation)

    forme = communes["legal_form"] or manquante
    ligne_capital = redaction.ligne_capital(forme, communes["legal_form_english"] or manquante, capital_avec_devise)
    ligne_immatriculation = redaction.ligne_immatriculation(ville_rcs, communes["siren_formatted"])
    ligne_siege = redaction.ligne_siege(adresse)

    role_anglais = resoudre_role_anglais(representant.role, representant.role_code, representant.role_anglais)
    queue = representant.representant_holding if representant.est_holding else None
    role_queue_anglais = ""

    accord: Accord
    if queue is not None:
        accord = redaction.accord(queue.genre)
        role_queue_anglais = resoudre_role_anglais(queue.role, queue.role_code, queue.role_anglais)
        ligne_representant = redaction.ligne_holding_avec_representant(
            representant.nom,
            representant.role,
            role_anglais,
            queue.nom,
            queue.role,
            role_queue_anglais,
            accord,
        )
    elif representant.est_holding:
        accord = redaction.accord_societe
        ligne_representant = redaction.ligne_holding(representant.nom, representant.role, role_anglais, accord)
    else:
        accord = redaction.accord(representant.genre)
        ligne_representant = redaction.ligne_representant(representant.nom, representant.role, role_anglais, accord)

    if representant.est_holding:
        holding = {
            "holding_representative_name": queue.nom if queue else "",
            "holding_representative_role": queue.role if queue else "",
            "holding_representative_gender": queue.genre.value if queue and queue.genre else "",
            "holding_representative_pronoun": accord.pronom,
            "holding_representative_verb": accord.verbe,
            "holding_representative_role_english": role_queue_anglais if queue else role_anglais,
        }
    else:
        holding = {}

    return {
        "company_type": TypeEntreprise.PERSONNE_MORALE.value,
        "company_name": denomination,
        "company_header": redaction.entete(denomination),
        "company_details": "\n".join(redaction.ordre_details(ligne_capital, ligne_immatriculation, ligne_siege)),
        "share_capital": capital,
        "share_capital_raw": capital_brut,
        "share_capital_with_currency": capital_avec_devise,
        "share_capital_line": ligne_capital,
        "rcs_city": ville_rcs,
        "registration_line": ligne_immatriculation,
        "head_office_address": adresse,
        "head_office_line": ligne_siege,
        "representative_name": representant.nom,
        "representative_role": representant.role,
        "representative_role_english": role_anglais,
        "representative_gender": representant.genre.value if representant.genre else "",
        "representative_is_holding": "true" if representant.est_holding else "false",
        "representative_line": ligne_representant,
        "representative_pronoun": accord.pronom,
        "representative_verb": accord.verbe,
        **holding,
        "full_name": denomination,
        "personal_address": adresse,
        "personal_address_line": ligne_siege,
    }


def _variables_personne_physique(
    pp: PersonnePhysique,
    communes: dict[str, str],
    redaction: RedactionLangue,
) -> dict[str, str]:
    desc = pp.description or DescriptionPersonne()
    genre = genre_depuis_code(desc.code_genre)

    prenom = next((p.strip() for p in desc.prenoms if p and p.strip()), "")
    nom = (desc.nom or "").strip()
    nom_complet = f"{prenom} {nom}".strip() or valeurs_par_defaut.NOM_REPRESENTANT
    civilite = redaction.civilite(genre)

    ne = redaction.mot_ne(genre)
    date_naissance = valeur_ou_defaut(desc.date_naissance, valeurs_par_defaut.DATE_NAISSANCE)
    lieu_naissance = valeur_ou_defaut(desc.lieu_naissance, valeurs_par_defaut.LIEU_NAISSANCE)
    nationalite = valeur_ou_defaut(desc.nationalite, valeurs_par_defaut.NATIONALITE)
    declaration = redaction.declaration_naissance(ne, date_naissance, lieu_naissance)
    ligne_nationalite = redaction.ligne_nationalite(nationalite)

    adresse = formater_adresse(pp.adresse_personne) or formater_adresse(pp.adresse_entreprise)
    demeurant = valeur_ou_defaut(adresse, valeurs_par_defaut.ADRESSE)
    ligne_adresse = redaction.ligne_adresse(demeurant)

    accord = redaction.accord(genre)
    numero = f"{redaction.libelle_numero}{communes['siren_formatted']}"

    return {
        "company_type": TypeEntreprise.PERSONNE_PHYSIQUE.value,
        "company_name": nom_complet,
        "company_header": f"{civilite} {nom_complet}",
        "company_details": "\n".join((declaration, ligne_nationalite, ligne_adresse, numero)),
        "civility": civilite,
        "first_name": prenom,
        "last_name": nom,
        "full_name": nom_complet,
        "birth_date": date_naissance,
        "birth_place": lieu_naissance,
        "birth_statement": declaration,
        "ne_word": ne,
        "nationality": nationalite,
        "nationality_line": ligne_nationalite,
        "personal_address": demeurant,
        "personal_address_line": ligne_adresse,
        "head_office_address": demeurant,
        "head_office_line": ligne_adresse,
        "representative_name": nom_complet,
        "representative_role": valeurs_par_defaut.QUALITE_REPRESENTANT,
        "representative_role_english": valeurs_par_defaut.QUALITE_REPRESENTANT,
        "representative_gender": genre.value if genre else "",
        "representative_is_holding": "false",
        "representative_pronoun": accord.pronom,
        "representative_verb": accord.verbe,
    }
