"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et les exceptions.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, HTTP, fichiers).

Sous-packages :
- entities/ : Entités métier (Film, Series, Catalog, collections et tags en aval)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
