"""
Ring.py - Construction de l'anneau de processus

Construit les N processus, les relie à leur précédent et referme le
cycle sur P0. Les valeurs initiales rendent tous les processus
privilégiés au départ, pire cas pour la convergence.
"""

import itertools
import sys

from Mailbox import Mailbox
from NotificationDistributor import NotificationDistributor
from Process import Process
from ProcessVariant import ProcessVariant
from RandomDelay import RandomDelay
from RingErrors import InvalidProcessCountError

MIN_PROCESSES = 3

# Identifiants des anneaux partageant le bus global
_ring_ids = itertools.count()


def check_process_count(npProcess):
    """
    Vérifie que l'anneau contient assez de processus.

    Raises:
        InvalidProcessCountError: si npProcess < 3
    """
    if npProcess < MIN_PROCESSES:
        raise InvalidProcessCountError(npProcess)


class Ring:
    """
    Anneau de Dijkstra : processus, canal de notifications et distributeur.

    P0 applique la règle de fermeture, P1..PN-1 la règle ordinaire ;
    chaque processus lit la valeur de son précédent, P0 lit celle de PN-1.
    """

    def __init__(self, npProcess, scheduler=None):
        """
        Construit l'anneau (aucun thread n'est démarré).

        Args:
            npProcess (int): Nombre de processus, au moins 3
            scheduler (RandomDelay, optional): Source des délais partagée
        """
        check_process_count(npProcess)

        self.npProcess = npProcess
        self.ring_id = next(_ring_ids)
        self.scheduler = scheduler if scheduler is not None else RandomDelay()

        # Canal de notifications vers l'observateur
        self.channel = Mailbox("Observer")
        self.distributor = NotificationDistributor(self.ring_id, self.channel)

        first = self._make(0, 0, None, ProcessVariant.RING_CLOSING)
        self.processes = [first]
        self.processes.append(self._make(1, 1, first, ProcessVariant.REGULAR))
        for k in range(2, npProcess - 1):
            self.processes.append(
                self._make(k, k, self.processes[-1], ProcessVariant.REGULAR))
        self.processes.append(
            self._make(npProcess - 1, 0, self.processes[-1], ProcessVariant.REGULAR))

        # Fermeture du cycle
        first.setPrevious(self.processes[-1])

        print(f"🔧 Ring {self.ring_id} built with {npProcess} processes",
              file=sys.stderr)

    def _make(self, process_id, value, previous, variant):
        return Process(process_id, value, previous, variant,
                       self.npProcess, self.scheduler, self.ring_id)

    def __len__(self):
        return len(self.processes)

    def __iter__(self):
        return iter(self.processes)

    def __getitem__(self, process_id):
        return self.processes[process_id]

    def privileged(self):
        """
        Retourne les processus actuellement privilégiés.

        Returns:
            list: IDs des processus privilégiés, par ordre croissant
        """
        return [p.getId() for p in self.processes if p.isPrivileged()]

    def values(self):
        return [p.getValue() for p in self.processes]

    def start(self):
        """Démarre la boucle d'exécution de chaque processus."""
        for p in self.processes:
            p.start()
        print(f"▶️  Ring {self.ring_id}: {self.npProcess} processes running",
              file=sys.stderr)

    def stop(self):
        for p in self.processes:
            p.stop()

    def waitStopped(self):
        for p in self.processes:
            p.waitStopped()

    def shutdown(self):
        """Arrête les processus, attend leur fin et quitte le bus."""
        self.stop()
        self.waitStopped()
        self.distributor.shutdown()
        print(f"✅ Ring {self.ring_id} stopped", file=sys.stderr)
