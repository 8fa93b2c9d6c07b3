"""The frozen set of resolved nodes and its parent-key index."""

from collections import defaultdict
from collections.abc import Iterable, Iterator

from dendron_nav.config import NOTE_SUFFIX
from dendron_nav.core.entry_config import resolve_doc_entry_config
from dendron_nav.core.synthesis import create_virtual_nodes
from dendron_nav.models.node import ImportedNode, ImportSuccess, ResolvedNode, parent_key


def _sort_key(node: ResolvedNode) -> tuple[int | float, str]:
    # Equal orders fall back to the full key so sibling order is deterministic.
    return (node.order, node.key)


class NodeRepository:
    """Imported and virtual nodes, queried by parent key.

    The child index is built once on construction; the repository is never
    modified afterwards.
    """

    def __init__(self, nodes: Iterable[ResolvedNode]) -> None:
        self._nodes: dict[str, ResolvedNode] = {}
        for node in nodes:
            if node.key in self._nodes:
                msg = f"Duplicate node key: {node.key!r}"
                raise ValueError(msg)
            self._nodes[node.key] = node

        children: dict[str | None, list[ResolvedNode]] = defaultdict(list)
        for node in self._nodes.values():
            parent = parent_key(node.key)
            if parent is not None and parent not in self._nodes:
                msg = f"Orphaned node: {node.key!r} (missing {parent!r})"
                raise ValueError(msg)
            children[parent].append(node)

        self._children: dict[str | None, tuple[ResolvedNode, ...]] = {
            parent: tuple(sorted(siblings, key=_sort_key))
            for parent, siblings in children.items()
        }

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ResolvedNode]:
        return iter(self._nodes.values())

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def get(self, key: str) -> ResolvedNode | None:
        return self._nodes.get(key)

    def roots(self) -> tuple[ResolvedNode, ...]:
        """Level-1 nodes in sibling order."""
        return self._children.get(None, ())

    def children(self, key: str) -> tuple[ResolvedNode, ...]:
        """Direct children of ``key`` in sibling order."""
        return self._children.get(key, ())


def to_imported_node(doc: ImportSuccess) -> ImportedNode:
    """Build the navigation node for a successfully imported note."""
    return ImportedNode(
        key=doc.key,
        uid=doc.uid,
        title=doc.title,
        created_at=doc.created_at,
        updated_at=doc.updated_at,
        filename=doc.filename or doc.key + NOTE_SUFFIX,
        link=f"/{doc.key}",
        order=doc.order,
        doc_entry_config=resolve_doc_entry_config(doc.doc_entry_raw),
    )


def build_repository(successes: Iterable[ImportSuccess]) -> NodeRepository:
    """Convert imported notes, add virtual ancestors, and index the result."""
    imported = [to_imported_node(doc) for doc in successes]
    virtual = create_virtual_nodes(imported)
    return NodeRepository([*imported, *virtual])
