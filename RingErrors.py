"""
RingErrors.py - Erreurs de démarrage de la simulation en anneau

Ces erreurs sont levées avant le lancement de tout thread, lors de la
lecture des arguments. Chacune porte son propre code de sortie.
"""


class RingError(Exception):
    """Erreur fatale de configuration de l'anneau."""

    exit_code = 1


class MissingArgumentError(RingError):
    """Aucun nombre de processus n'a été fourni."""

    exit_code = 1

    def __init__(self):
        RingError.__init__(self, "missing number of processes.")


class InvalidProcessCountError(RingError):
    """Nombre de processus invalide (non entier ou inférieur à 3)."""

    exit_code = 2

    def __init__(self, value):
        """
        Args:
            value: Valeur refusée, telle que fournie
        """
        RingError.__init__(
            self,
            "there must be at least 3 processes for the algorithm to make sense "
            f"(got {value!r}).")
        self.value = value


class InvalidOptionError(RingError):
    """Durée d'exécution ou délai moyen invalide."""

    exit_code = 3

    def __init__(self, name, value):
        RingError.__init__(self, f"invalid {name}: {value!r}.")
        self.name = name
        self.value = value
