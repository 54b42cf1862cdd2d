"""
metrowatch - Synchronisation des séries Metrograph vers Radarr et Agregarr.

Ce package scrape les séries de films publiées par le Metrograph, résout chaque
film vers son ID TMDB, persiste le catalogue entre les exécutions et maintient
les tags Radarr et les collections Agregarr alignés sur le catalogue courant.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (résolution, fusion, tagging, réconciliation)
- adapters/ : Couche infrastructure (CLI, clients API, scraping)
- infrastructure/ : Persistance des snapshots JSON
"""

__version__ = "0.1.0"
