"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), erreurs métier
et contrats de validation d'entrée.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, BDD).

Sous-packages et modules :
- entities/ : Entités métier (Airline, Airport)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors.py : Taxonomie des erreurs métier partagée par les services
- dtos.py : Objets de requête validés à la frontière
"""
