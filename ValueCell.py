"""
ValueCell.py - Cellule de valeur à écrivain unique

La valeur d'un processus est écrite par son seul propriétaire et lue
par lui-même et par son successeur dans l'anneau. Chaque lecture et
chaque écriture est atomique, mais aucun verrou n'englobe la séquence
lecture-comparaison-écriture d'une règle : la lecture du voisin reste
non synchronisée avec ses propres écritures.
"""

from threading import Lock


class ValueCell:
    """Scalaire lisible et modifiable atomiquement."""

    def __init__(self, value):
        """
        Args:
            value (int): Valeur initiale
        """
        self._value = value
        self._lock = Lock()

    def load(self):
        """
        Lit la valeur courante.

        Returns:
            int: Dernière valeur écrite
        """
        with self._lock:
            return self._value

    def store(self, value):
        """
        Remplace la valeur courante.

        Args:
            value (int): Nouvelle valeur
        """
        with self._lock:
            self._value = value

    def __repr__(self):
        return f"ValueCell({self.load()})"
