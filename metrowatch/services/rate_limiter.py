"""
Espacement minimal entre deux appels a une API externe.

Le quota TMDB est respecte par prevention : chaque appel attend que le
delai minimal se soit ecoule depuis le precedent. Aucun retry n'est fait.
"""

import time
from typing import Callable, Optional


class RateLimiter:
    """
    Impose un intervalle minimal entre deux appels consecutifs.

    L'horloge et la fonction de sommeil sont injectables pour les tests.

    Example:
        limiter = RateLimiter(min_interval=0.25)
        for query in queries:
            limiter.wait()
            client.search(query)
    """

    def __init__(
        self,
        min_interval: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min_interval <= 0:
            raise ValueError(f"Intervalle minimal invalide: {min_interval}")
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_call: Optional[float] = None

    def wait(self) -> None:
        """Bloque jusqu'a ce que l'appel suivant soit autorise, puis l'enregistre."""
        if self._last_call is not None:
            remaining = self._min_interval - (self._clock() - self._last_call)
            if remaining > 0:
                self._sleep(remaining)
        self._last_call = self._clock()
