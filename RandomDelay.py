"""
RandomDelay.py - Générateur des temps de réflexion des processus

Chaque boucle de processus attend un délai aléatoire avant de tenter
sa transition. Les délais suivent une loi exponentielle obtenue par
inversion de la fonction de répartition : t = -moyenne * ln(1 - u),
avec u uniforme dans [0, 1).
"""

import math
import random
import time
from threading import Lock


class RandomDelay:
    """
    Source de délais partagée par tous les processus d'un anneau.

    Le générateur aléatoire est protégé par un verrou pour que les
    tirages concurrents restent indépendants.
    """

    def __init__(self, mean=5.0, seed=None):
        """
        Args:
            mean (float): Délai moyen en secondes
            seed: Graine optionnelle du générateur (tests reproductibles)
        """
        if mean <= 0:
            raise ValueError(f"mean delay must be positive, got {mean}")
        self.mean = mean
        self.rng = random.Random(seed)
        self.lock = Lock()

    def draw(self):
        """
        Tire un nombre uniforme dans [0, 1).

        Returns:
            float: Tirage uniforme
        """
        with self.lock:
            return self.rng.random()

    def next_delay(self):
        """
        Tire le prochain temps de réflexion.

        Returns:
            float: Délai en secondes, de loi exponentielle
        """
        u = self.draw()
        return -self.mean * math.log(1.0 - u)

    def sleep(self, duration, halted=None):
        """
        Bloque le thread appelant pendant toute la durée demandée.

        Un réveil prématuré est relancé avec le temps restant, mesuré sur
        une échéance monotone.

        Args:
            duration (float): Durée en secondes
            halted (threading.Event, optional): Événement d'arrêt qui
                interrompt l'attente

        Returns:
            bool: True si la durée complète s'est écoulée, False si l'arrêt
            a été demandé
        """
        deadline = time.monotonic() + duration
        remaining = duration
        while remaining > 0:
            if halted is not None:
                if halted.wait(remaining):
                    return False
            else:
                time.sleep(remaining)
            remaining = deadline - time.monotonic()
        return halted is None or not halted.is_set()
