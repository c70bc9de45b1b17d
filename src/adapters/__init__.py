"""
Couche adaptateurs.

Les adaptateurs exposent les cas d'utilisation de services/ vers l'exterieur.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur depend de core/ et services/, mais core/ ne depend jamais
des adaptateurs.
"""
