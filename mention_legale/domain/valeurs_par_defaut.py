# mention_legale/domain/valeurs_par_defaut.py
#
# Placeholder tokens substituted for missing registry facts. They are meant to
# be visible in the rendered paragraph so that the user completes them by hand.
from __future__ import annotations

NOM_REPRESENTANT = "[[Nom du représentant]]"
QUALITE_REPRESENTANT = "[[Qualité du représentant]]"
DONNEE_MANQUANTE = "[[Donnée manquante]]"
DATE_NAISSANCE = "[[Date de naissance]]"
LIEU_NAISSANCE = "[[Lieu de naissance]]"
NATIONALITE = "[[Nationalité]]"
ADRESSE = "[[Adresse]]"
VILLE_RCS = "[[Ville du RCS]]"

AUCUNE_INFORMATION = "No information to display."
