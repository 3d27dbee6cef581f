"""
Mailbox.py - Canal de notifications des processus vers l'observateur

Boîte aux lettres thread-safe : plusieurs processus y déposent leur
identifiant, un seul observateur les retire dans l'ordre de dépôt.
"""

from threading import Lock, Condition
from collections import deque


class Mailbox:
    """
    File FIFO non bornée, multi-producteurs / consommateur unique.

    - Un dépôt n'est jamais perdu ni refusé
    - Le retrait bloquant attend sans attente active
    - L'ordre de retrait est l'ordre d'acceptation des dépôts
    """

    def __init__(self, owner_name):
        """
        Initialise la boîte aux lettres.

        Args:
            owner_name (str): Nom lisible du consommateur (ex: "Observer")
        """
        self.owner_name = owner_name

        # File d'attente des identifiants (FIFO)
        self.messages = deque()

        # Synchronisation thread-safe
        self.lock = Lock()
        self.condition = Condition(self.lock)

    def deposit_message(self, process_id):
        """
        Dépose l'identifiant d'un processus qui vient d'agir.

        Args:
            process_id (int): ID du processus émetteur
        """
        with self.condition:
            self.messages.append(process_id)
            # Réveiller le consommateur en attente
            self.condition.notify_all()

    def has_messages(self):
        """Vérifie s'il y a des notifications en attente."""
        with self.lock:
            return len(self.messages) > 0

    def get_message(self):
        """
        Récupère la prochaine notification sans attendre.

        Returns:
            int | None: ID du processus, ou None si la boîte est vide
        """
        with self.lock:
            if len(self.messages) > 0:
                return self.messages.popleft()
            return None

    def wait_for_message(self, timeout=None):
        """
        Attend l'arrivée d'une notification (bloquant).

        Args:
            timeout (float, optional): Timeout en secondes. None = attente infinie

        Returns:
            int | None: ID du processus, ou None si timeout
        """
        with self.condition:
            if not self.condition.wait_for(lambda: len(self.messages) > 0, timeout):
                return None
            return self.messages.popleft()

    def get_message_count(self):
        """Retourne le nombre de notifications en attente."""
        with self.lock:
            return len(self.messages)
