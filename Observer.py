"""
Observer.py - Coordinateur qui affiche l'anneau à chaque transition

L'observateur attend les notifications des processus et imprime un
instantané complet de l'anneau pour chacune d'elles. L'instantané peut
être légèrement en retard sur l'état réel : d'autres processus ont pu
agir entre la notification et l'affichage.
"""

import sys
import time

from Snapshot import render_ring


class Observer:
    """Consommateur unique du canal de notifications d'un anneau."""

    def __init__(self, ring, out=None):
        """
        Args:
            ring (Ring): Anneau observé
            out: Flux de sortie des instantanés (sys.stdout par défaut)
        """
        self.ring = ring
        self.out = out if out is not None else sys.stdout

    def print_snapshot(self, acted_id=None):
        """
        Imprime l'état de tous les processus, suivi d'une ligne vide.

        Args:
            acted_id (int, optional): ID du processus à marquer comme acteur
        """
        self.out.write(render_ring(self.ring, acted_id) + "\n\n")
        self.out.flush()

    def run(self, running_time=None, max_notifications=None):
        """
        Affiche un instantané par notification reçue.

        Sans argument, tourne indéfiniment.

        Args:
            running_time (float, optional): Durée maximale en secondes
            max_notifications (int, optional): Nombre maximal de notifications

        Returns:
            int: Nombre de notifications traitées
        """
        deadline = None if running_time is None else time.monotonic() + running_time
        handled = 0
        while max_notifications is None or handled < max_notifications:
            timeout = None
            if deadline is not None:
                timeout = deadline - time.monotonic()
                if timeout <= 0:
                    break
            process_id = self.ring.channel.wait_for_message(timeout)
            if process_id is None:
                break
            self.print_snapshot(process_id)
            handled += 1
        return handled
