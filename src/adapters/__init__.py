"""
Couche adaptateurs (frontière).

Les adaptateurs traduisent les entrées externes en appels de services et
les erreurs métier en sorties lisibles.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ et services/, jamais l'inverse.
"""
