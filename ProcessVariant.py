"""
ProcessVariant.py - Variantes de règle des processus de l'anneau

Cette énumération distingue les deux règles de transition de
l'algorithme de Dijkstra.
"""

from enum import Enum

class ProcessVariant(Enum):
    """
    Règle appliquée par un processus de l'anneau.

    REGULAR :      privilégié si sa valeur diffère de celle du précédent,
                   il copie alors la valeur du précédent.
    RING_CLOSING : privilégié si sa valeur égale celle du précédent,
                   il l'incrémente alors modulo N (processus P0 uniquement).
    """

    REGULAR = "regular"             # Processus ordinaire
    RING_CLOSING = "ring_closing"   # Processus P0 qui referme l'anneau
