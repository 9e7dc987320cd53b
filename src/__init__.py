"""
AeroReg - Registre des compagnies aériennes et des aéroports.

Ce package gère deux entités liées (compagnies aériennes et aéroports)
et l'association plusieurs-à-plusieurs entre elles, avec les règles de
validation appliquées dans la couche service.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs métier, DTO)
- services/ : Couche application (cas d'utilisation, cohérence inter-entités)
- infrastructure/ : Persistance SQLModel (modèles et repositories)
- adapters/ : Interface ligne de commande (Typer + Rich)
"""
