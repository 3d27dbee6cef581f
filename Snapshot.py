"""
Snapshot.py - Rendu textuel de l'état de l'anneau

Un processus privilégié est souligné (U+0332 après chaque caractère),
le processus qui vient d'agir porte un caron (U+030C).
"""

UNDERLINE = "\u0332"
CARON = "\u030C"


def render_process(process, acted=False):
    """
    Rend un processus sous la forme p<id>.

    Args:
        process (Process): Processus à afficher
        acted (bool): True si ce processus a déclenché l'instantané

    Returns:
        str: Représentation du processus
    """
    if process.isPrivileged():
        text = "p" + UNDERLINE + "".join(c + UNDERLINE for c in str(process.getId()))
    else:
        text = f"p{process.getId()}"
    if acted:
        text += CARON
    return text


def render_ring(processes, acted_id=None):
    """Rend tous les processus par ID croissant, séparés par des virgules."""
    return ",".join(render_process(p, p.getId() == acted_id) for p in processes)
