"""
Couche infrastructure de metrowatch.

Ce module contient les implementations concretes des preoccupations techniques
locales :

- persistence/ : Snapshots JSON du catalogue

Les clients HTTP (TMDB, Radarr, Agregarr, site du cinema) vivent dans
metrowatch.adapters.
"""
