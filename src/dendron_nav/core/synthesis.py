"""Synthesize virtual ancestors implied by dotted note keys."""

from collections.abc import Iterable

from loguru import logger

from dendron_nav.config import VIRTUAL_ORDER
from dendron_nav.models.node import ImportedNode, VirtualNode


def create_virtual_nodes(nodes: Iterable[ImportedNode]) -> list[VirtualNode]:
    """Create a VirtualNode for every ancestor key no imported node covers.

    Each missing key is created once, however many descendants imply it.
    The result is ordered by first discovery.
    """
    nodes = list(nodes)
    seen = {node.key for node in nodes}
    virtual_nodes: list[VirtualNode] = []

    for node in nodes:
        parts = node.key.split(".")
        for i in range(1, len(parts)):
            prefix = ".".join(parts[:i])
            if prefix in seen:
                continue
            seen.add(prefix)
            virtual_nodes.append(VirtualNode(key=prefix, title=parts[i - 1], order=VIRTUAL_ORDER))

    if virtual_nodes:
        logger.debug(
            "Synthesized {} virtual node(s): {}",
            len(virtual_nodes),
            ", ".join(v.key for v in virtual_nodes),
        )
    return virtual_nodes
