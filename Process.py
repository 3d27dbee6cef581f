"""
Process.py - Processus de l'anneau auto-stabilisant de Dijkstra

Ce module implémente un processus de l'anneau avec :
- Une valeur propre, écrite par lui seul
- Une référence en lecture seule vers le processus précédent
- Une règle de transition (ordinaire ou de fermeture de l'anneau)
- Une boucle d'exécution indépendante : attente aléatoire, tentative,
  notification
"""

import sys
from threading import Thread, Event

from pyeventbus3.pyeventbus3 import PyBus
from PrivilegeMessage import PrivilegeMessage
from ProcessVariant import ProcessVariant
from ValueCell import ValueCell


class Process(Thread):
    """
    Processus de l'anneau de Dijkstra.

    Responsabilités :
    - Évaluer son privilège par rapport au processus précédent
    - Effectuer sa transition quand il est privilégié
    - Publier son ID sur le bus à chaque transition réussie
    """

    def __init__(self, process_id, value, previous, variant, npProcess, scheduler, ring_id):
        """
        Initialise un processus (le thread n'est pas démarré).

        Args:
            process_id (int): ID unique du processus (0..N-1)
            value (int): Valeur initiale
            previous (Process | None): Processus précédent dans l'anneau
            variant (ProcessVariant): Règle de transition
            npProcess (int): Nombre total de processus (N)
            scheduler (RandomDelay): Source des temps de réflexion
            ring_id (int): Identifiant de l'anneau, joint aux notifications
        """
        Thread.__init__(self, daemon=True)

        self.myId = process_id
        self.myProcessName = f"P{process_id}"
        self.name = "Process-" + self.myProcessName
        self.npProcess = npProcess
        self.variant = variant
        self.value = ValueCell(value)
        self.previous = previous
        self.scheduler = scheduler
        self.ring_id = ring_id

        # Contrôle de la boucle principale
        self.alive = True
        self.halted = Event()

    def getId(self):
        return self.myId

    def getValue(self):
        return self.value.load()

    def setPrevious(self, previous):
        """
        Fixe le processus précédent (fermeture de l'anneau sur P0).

        Args:
            previous (Process): Dernier processus construit
        """
        self.previous = previous

    # === RÈGLE DE DIJKSTRA ===

    def isPrivileged(self):
        """
        Indique si la règle de transition de ce processus est applicable.

        Returns:
            bool: True si le processus détient un privilège (jeton)
        """
        if self.previous is None:
            return False
        mine = self.value.load()
        theirs = self.previous.value.load()
        if self.variant is ProcessVariant.RING_CLOSING:
            return mine == theirs
        return mine != theirs

    def tryAct(self):
        """
        Applique la règle de transition si le processus est privilégié.

        Ordinaire : copie la valeur du précédent quand elle diffère.
        Fermeture : incrémente sa valeur modulo N quand elle égale celle
        du précédent.

        Returns:
            bool: True si la valeur a changé, False sinon
        """
        if self.previous is None:
            return False
        mine = self.value.load()
        theirs = self.previous.value.load()

        if self.variant is ProcessVariant.RING_CLOSING:
            if mine != theirs:
                return False
            self.value.store((mine + 1) % self.npProcess)
        else:
            if mine == theirs:
                return False
            self.value.store(theirs)
        return True

    def notify(self):
        """Publie sur le bus l'ID de ce processus (retour après dépôt)."""
        PyBus.Instance().post(PrivilegeMessage(self.ring_id, self.myId))

    def step(self):
        """
        Une tentative de transition suivie de sa notification.

        Returns:
            bool: True si le processus a agi (et notifié)
        """
        acted = self.tryAct()
        if acted:
            self.notify()
        return acted

    # === BOUCLE D'EXÉCUTION ===

    def run(self):
        while self.alive:
            # Temps de réflexion aléatoire, interrompu seulement par stop()
            if not self.scheduler.sleep(self.scheduler.next_delay(), self.halted):
                break
            self.step()
        print(f"🛑 {self.name} stopped", file=sys.stderr)

    def stop(self):
        self.alive = False
        self.halted.set()

    def waitStopped(self):
        if self.is_alive():
            self.join()

    def __repr__(self):
        return (f"Process(id={self.myId}, value={self.getValue()}, "
                f"variant={self.variant.value})")
