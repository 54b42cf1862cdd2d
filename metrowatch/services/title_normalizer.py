"""
Normalisation des titres scrapes en variantes de recherche.

Les titres du cinema portent souvent des annotations qui empechent la
recherche TMDB d'aboutir :
- "Carol [4K DCP]" : annotation entre crochets
- "ACE Presents: Carol" : prefixe de presentation

Les variantes sont produites dans l'ordre ou elles doivent etre essayees :
original, sans crochets, sans prefixe, sans les deux.
"""

import re

BRACKETS_PATTERN = re.compile(r"\[[^\]]*\]")
PRESENTS_PATTERN = re.compile(r"^.*presents:\s*", re.IGNORECASE)


def strip_brackets(title: str) -> str:
    """Supprime les annotations entre crochets. "Carol [4K DCP]" -> "Carol"."""
    return BRACKETS_PATTERN.sub("", title).strip()


def strip_presents(title: str) -> str:
    """Supprime le prefixe "... Presents:". "ACE Presents: Carol" -> "Carol"."""
    return PRESENTS_PATTERN.sub("", title).strip()


def title_variants(title: str) -> list[str]:
    """
    Produit les variantes ordonnees d'un titre pour le matching.

    La premiere variante est toujours le titre original. Les suivantes ne
    sont ajoutees que si elles sont non vides et differentes de toutes les
    variantes deja presentes.

    Args:
        title: Titre tel que scrape

    Returns:
        Liste non vide de variantes sans doublon

    Example:
        >>> title_variants("ACE Presents: Carol [4K DCP]")
        ['ACE Presents: Carol [4K DCP]', 'ACE Presents: Carol', 'Carol [4K DCP]', 'Carol']
    """
    without_brackets = strip_brackets(title)
    candidates = (
        without_brackets,
        strip_presents(title),
        strip_presents(without_brackets),
    )

    variants = [title]
    for candidate in candidates:
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants
