"""
Launcher.py - Point d'entrée de la simulation de l'anneau de Dijkstra

Usage : python Launcher.py N [runningTime [meanDelay]]

Construit l'anneau de N processus, imprime son état initial, lance les
processus puis affiche un instantané à chaque transition. Sans durée,
la simulation tourne jusqu'à l'arrêt du programme (Ctrl-C).
"""

import sys

from Observer import Observer
from RandomDelay import RandomDelay
from Ring import Ring, check_process_count
from RingErrors import RingError, MissingArgumentError, InvalidProcessCountError, InvalidOptionError


def _positive_float(name, text):
    try:
        value = float(text)
    except ValueError:
        raise InvalidOptionError(name, text) from None
    if value <= 0:
        raise InvalidOptionError(name, text)
    return value


def parse_arguments(argv):
    """
    Lit les arguments de la ligne de commande.

    Args:
        argv (list): Arguments sans le nom du programme

    Returns:
        tuple: (npProcess, runningTime ou None, meanDelay)

    Raises:
        MissingArgumentError: aucun nombre de processus
        InvalidProcessCountError: nombre non entier ou inférieur à 3
        InvalidOptionError: durée ou délai moyen invalide
    """
    if len(argv) < 1:
        raise MissingArgumentError()

    try:
        npProcess = int(argv[0])
    except ValueError:
        raise InvalidProcessCountError(argv[0]) from None
    check_process_count(npProcess)

    runningTime = None
    if len(argv) > 1:
        runningTime = _positive_float("running time", argv[1])

    meanDelay = 5.0
    if len(argv) > 2:
        meanDelay = _positive_float("mean delay", argv[2])

    return npProcess, runningTime, meanDelay


def launch(npProcess, runningTime=None, meanDelay=5.0, out=None):
    """
    Lance la simulation.

    Args:
        npProcess (int): Nombre de processus de l'anneau
        runningTime (float, optional): Durée d'exécution en secondes, None = sans fin
        meanDelay (float): Temps de réflexion moyen des processus en secondes
        out: Flux des instantanés (sys.stdout par défaut)

    Returns:
        int: Nombre de transitions affichées
    """
    ring = Ring(npProcess, RandomDelay(meanDelay))
    observer = Observer(ring, out)

    # État initial imprimé avant que le moindre processus puisse agir
    observer.print_snapshot()
    ring.start()

    try:
        return observer.run(running_time=runningTime)
    finally:
        ring.shutdown()


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        npProcess, runningTime, meanDelay = parse_arguments(argv)
    except RingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    try:
        handled = launch(npProcess, runningTime, meanDelay)
    except KeyboardInterrupt:
        print("\n🛑 Interrupted by user", file=sys.stderr)
        return 0

    print(f"✅ {handled} transitions displayed", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
