# mention_legale/domain/mention/greffes.py
#
# Registry-city resolution: which commercial court registry (greffe) keeps the
# RCS entry of a company, derived from the department of its head office.
#
# Design decisions:
#   - One greffe per department: the seat of the department's main commercial
#     court. Departments with several greffes resolve to the main one; the
#     registry's own villeImmatriculation is only a fallback because it is
#     often missing or stale on older records.
#   - Corsica is split on the postal code (200xx-201xx Corse-du-Sud, 202xx and
#     above Haute-Corse) since postal codes do not carry 2A/2B.
from __future__ import annotations

from mention_legale.domain import valeurs_par_defaut
from mention_legale.domain.entreprise.entities import Adresse

from .formatage import formater_nom_ville

GREFFES_PAR_DEPARTEMENT: dict[str, str] = {
    "01": "Bourg-en-Bresse",
    "02": "Saint-Quentin",
    "03": "Cusset",
    "04": "Manosque",
    "05": "Gap",
    "06": "Nice",
    "07": "Aubenas",
    "08": "Sedan",
    "09": "Foix",
    "10": "Troyes",
    "11": "Carcassonne",
    "12": "Rodez",
    "13": "Marseille",
    "14": "Caen",
    "15": "Aurillac",
    "16": "Angoulême",
    "17": "La Rochelle",
    "18": "Bourges",
    "19": "Brive-la-Gaillarde",
    "2A": "Ajaccio",
    "2B": "Bastia",
    "21": "Dijon",
    "22": "Saint-Brieuc",
    "23": "Guéret",
    "24": "Périgueux",
    "25": "Besançon",
    "26": "Romans-sur-Isère",
    "27": "Evreux",
    "28": "Chartres",
    "29": "Quimper",
    "30": "Nîmes",
    "31": "Toulouse",
    "32": "Auch",
    "33": "Bordeaux",
    "34": "Montpellier",
    "35": "Rennes",
    "36": "Châteauroux",
    "37": "Tours",
    "38": "Grenoble",
    "39": "Lons-le-Saunier",
    "40": "Mont-de-Marsan",
    "41": "Blois",
    "42": "Saint-Etienne",
    "43": "Le Puy-en-Velay",
    "44": "Nantes",
    "45": "Orléans",
    "46": "Cahors",
    "47": "Agen",
    "48": "Mende",
    "49": "Angers",
    "50": "Coutances",
    "51": "Reims",
    "52": "Chaumont",
    "53": "Laval",
    "54": "Nancy",
    "55": "Bar-le-Duc",
    "56": "Lorient",
    "57": "Metz",
    "58": "Nevers",
    "59": "Lille Métropole",
    "60": "Compiègne",
    "61": "Alençon",
    "62": "Arras",
    "63": "Clermont-Ferrand",
    "64": "Pau",
    "65": "Tarbes",
    "66": "Perpignan",
    "67": "Strasbourg",
    "68": "Mulhouse",
    "69": "Lyon",
    "70": "Vesoul",
    "71": "Chalon-sur-Saône",
    "72": "Le Mans",
    "73": "Chambéry",
    "74": "Annecy",
    "75": "Paris",
    "76": "Rouen",
    "77": "Melun",
    "78": "Versailles",
    "79": "Niort",
    "80": "Amiens",
    "81": "Albi",
    "82": "Montauban",
    "83": "Toulon",
    "84": "Avignon",
    "85": "La Roche-sur-Yon",
    "86": "Poitiers",
    "87": "Limoges",
    "88": "Epinal",
    "89": "Auxerre",
    "90": "Belfort",
    "91": "Evry",
    "92": "Nanterre",
    "93": "Bobigny",
    "94": "Créteil",
    "95": "Pontoise",
    "971": "Pointe-à-Pitre",
    "972": "Fort-de-France",
    "973": "Cayenne",
    "974": "Saint-Denis",
    "975": "Saint-Pierre",
    "976": "Mamoudzou",
}


def departement_depuis_code_postal(code_postal: str) -> str | None:
    code = "".join(c for c in code_postal if c.isdigit())
    if len(code) != 5:
        return None
    if code.startswith("97"):
        return code[:3]
    if code.startswith("20"):
        return "2A" if code[2] in "01" else "2B"
    return code[:2]


def greffe_depuis_code_postal(code_postal: str | None) -> str | None:
    if not code_postal:
        return None
    departement = departement_depuis_code_postal(code_postal)
    if departement is None:
        return None
    return GREFFES_PAR_DEPARTEMENT.get(departement)


def resoudre_ville_rcs(adresse: Adresse | None, ville_immatriculation: str | None) -> str:
    """Greffe du departement du siege, sinon ville d'immatriculation declaree,
    sinon le libelle de substitution."""
    brute = greffe_depuis_code_postal(adresse.code_postal if adresse else None) or ville_immatriculation
    if not brute or not brute.strip():
        return valeurs_par_defaut.VILLE_RCS
    return formater_nom_ville(brute)
