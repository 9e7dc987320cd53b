"""
Couche infrastructure d'AeroReg.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage SQL avec SQLModel (modeles, liens et repositories)

Architecture hexagonale : changer de base (ex: PostgreSQL au lieu de SQLite)
ne demande que AEROREG_DATABASE_URL, sans toucher a la logique metier.
"""
