"""
NotificationDistributor.py - Routage des notifications du bus vers le canal

Le distributeur s'enregistre au bus PyBus et dépose chaque notification
de son anneau dans la boîte aux lettres de l'observateur.
"""

import sys
from pyeventbus3.pyeventbus3 import PyBus, Mode, subscribe
from PrivilegeMessage import PrivilegeMessage


class NotificationDistributor:
    """
    Lien entre le bus PyBus global et la boîte aux lettres d'un anneau.

    Le handler s'exécute dans le thread qui publie (Mode.POSTING) : la
    publication d'un processus ne rend la main qu'une fois son ID déposé,
    et deux publications d'un même processus arrivent dans l'ordre.
    """

    def __init__(self, ring_id, mailbox):
        """
        Initialise le distributeur et l'enregistre au bus.

        Args:
            ring_id (int): Identifiant de l'anneau servi
            mailbox (Mailbox): Canal de l'observateur de cet anneau
        """
        self.ring_id = ring_id
        self.mailbox = mailbox
        self.registered = True

        PyBus.Instance().register(self, self)

    @subscribe(threadMode=Mode.POSTING, onEvent=PrivilegeMessage)
    def distribute_privilege(self, event):
        """
        Dépose l'ID du processus émetteur si l'événement vient de cet anneau.

        Args:
            event (PrivilegeMessage): Notification publiée par un processus
        """
        if event.getRingId() != self.ring_id:
            return
        self.mailbox.deposit_message(event.getProcessId())

    def shutdown(self):
        """Désinscription du bus (sans effet au second appel)."""
        if not self.registered:
            return
        self.registered = False
        try:
            PyBus.Instance().unregister(self, self)
        except (AttributeError, TypeError):
            # unregister absent ou de signature différente dans cette version :
            # le filtre sur ring_id isole déjà les anneaux suivants
            print(f"📡🛑 Distributor of ring {self.ring_id} shutdown "
                  "(unregister not available)", file=sys.stderr)
