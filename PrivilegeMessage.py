"""
PrivilegeMessage.py - Notification d'une transition d'un processus

Ce message est publié sur le bus à chaque transition réussie d'un
processus. Il transporte l'identifiant du processus qui vient d'agir.
"""


class PrivilegeMessage:
    """
    Notification « le processus P<id> vient d'agir ».

    L'identifiant d'anneau permet à plusieurs anneaux de partager le
    bus global sans mélanger leurs notifications.
    """

    def __init__(self, ring_id, process_id):
        """
        Initialise une notification.

        Args:
            ring_id (int): Identifiant de l'anneau émetteur
            process_id (int): ID du processus qui a effectué sa transition
        """
        self.ring_id = ring_id
        self.process_id = process_id

    def getRingId(self):
        """
        Retourne l'identifiant de l'anneau émetteur.

        Returns:
            int: Identifiant de l'anneau
        """
        return self.ring_id

    def getProcessId(self):
        """
        Retourne l'ID du processus qui a agi.

        Returns:
            int: ID du processus
        """
        return self.process_id

    def __repr__(self):
        return f"PrivilegeMessage(ring={self.ring_id}, process=P{self.process_id})"
