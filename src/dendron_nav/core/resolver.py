"""Resolve the node hierarchy into nav, sidebar and lookup tables.

Traversal has two phases. Above a sidebar root (a node with an entry
config) nodes become nested nav items. Below it they become sidebar items,
and the leaves feed the link vocabulary, the leaf list and the redirects.
Each sidebar root collapses into a single nav link pointing at its landing
leaf.
"""

import dataclasses
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from loguru import logger

from dendron_nav.config import DEFAULT_BASE_URL
from dendron_nav.core.repository import NodeRepository, build_repository
from dendron_nav.models.node import (
    ImportedNode,
    ImportFailure,
    ImportResult,
    ImportSuccess,
    LandingPoint,
    LeafDocument,
    NavBranch,
    NavItem,
    NavLink,
    ResolvedConfig,
    ResolvedNode,
    SidebarItem,
)


class EmptyCorpusError(RuntimeError):
    """No note was imported successfully, so there is nothing to resolve."""


@dataclass
class _Accumulator:
    """Side tables filled during one traversal."""

    base_url: str
    sidebar: dict[str, tuple[SidebarItem, ...]] = field(default_factory=dict)
    links_vocabulary: dict[str, str] = field(default_factory=dict)
    leaf_nodes: list[LeafDocument] = field(default_factory=list)
    redirects: dict[str, str] = field(default_factory=dict)
    src_exclude: list[str] = field(default_factory=list)
    landing_links: dict[str, str] = field(default_factory=dict)

    def record_leaf(
        self,
        node: ImportedNode,
        *,
        root_key: str,
        landing_point: LandingPoint,
        breadcrumbs: tuple[str, ...],
    ) -> None:
        self.links_vocabulary[node.key] = node.title
        self.leaf_nodes.append(LeafDocument(node=node, breadcrumbs=(*breadcrumbs, node.title)))
        # "last" keeps overwriting so the last visited leaf wins; "first" never
        # displaces a recorded link.
        if landing_point == "last" or root_key not in self.landing_links:
            self.landing_links[root_key] = node.link
        self.redirects[node.uid] = f"{self.base_url}{node.key}"


def _collapse_non_landing(
    items: tuple[SidebarItem, ...], landing_link: str | None
) -> tuple[SidebarItem, ...]:
    """Expand the direct item holding the landing leaf and collapse its siblings."""
    expanded_key = None
    if landing_link is not None:
        for item in items:
            if landing_link.startswith(f"/{item.key}.") or item.link == landing_link:
                expanded_key = item.key
                break
    return tuple(dataclasses.replace(item, collapsed=item.key != expanded_key) for item in items)


def _traverse_after_entry(
    repository: NodeRepository,
    acc: _Accumulator,
    node: ResolvedNode,
    *,
    root_key: str,
    landing_point: LandingPoint,
    breadcrumbs: tuple[str, ...],
) -> SidebarItem:
    children = repository.children(node.key)

    if isinstance(node, ImportedNode) and not children:
        acc.record_leaf(
            node, root_key=root_key, landing_point=landing_point, breadcrumbs=breadcrumbs
        )
        return SidebarItem(key=node.key, title=node.title, link=node.link)

    breadcrumbs = (*breadcrumbs, node.title)
    items = tuple(
        _traverse_after_entry(
            repository,
            acc,
            child,
            root_key=root_key,
            landing_point=landing_point,
            breadcrumbs=breadcrumbs,
        )
        for child in children
    )
    if isinstance(node, ImportedNode):
        acc.src_exclude.append(node.filename)
    return SidebarItem(key=node.key, title=node.title, children=items)


def _traverse_until_entry(
    repository: NodeRepository,
    acc: _Accumulator,
    node: ResolvedNode,
    breadcrumbs: tuple[str, ...],
) -> NavItem:
    breadcrumbs = (*breadcrumbs, node.title)
    if isinstance(node, ImportedNode):
        acc.src_exclude.append(node.filename)

    children = repository.children(node.key)
    entry = node.doc_entry_config

    if entry is None:
        return NavBranch(
            title=node.title,
            children=tuple(
                _traverse_until_entry(repository, acc, child, breadcrumbs) for child in children
            ),
        )

    items = tuple(
        _traverse_after_entry(
            repository,
            acc,
            child,
            root_key=node.key,
            landing_point=entry.landing_point,
            breadcrumbs=breadcrumbs,
        )
        for child in children
    )
    landing_link = acc.landing_links.get(node.key)
    if landing_link is None:
        logger.warning("Sidebar root {} has no leaf to land on", node.key)
    if entry.collapse_non_landing_children:
        items = _collapse_non_landing(items, landing_link)
    acc.sidebar[node.key] = items

    return NavLink(title=node.title, link=landing_link)


def resolve_hierarchy(
    repository: NodeRepository, *, base_url: str = DEFAULT_BASE_URL
) -> ResolvedConfig:
    """Traverse the repository from its roots and collect every output table.

    Args:
        repository: Imported and virtual nodes of one import snapshot.
        base_url: Prefix for redirect targets.

    Returns:
        ResolvedConfig with nav, sidebars, vocabulary, leaves, redirects and
        the source files that must not be rendered as standalone pages.
    """
    acc = _Accumulator(base_url=base_url)
    nav = tuple(_traverse_until_entry(repository, acc, root, ()) for root in repository.roots())

    logger.debug(
        "Resolved {} nav item(s), {} sidebar(s), {} leaf page(s)",
        len(nav),
        len(acc.sidebar),
        len(acc.leaf_nodes),
    )
    return ResolvedConfig(
        nav=nav,
        sidebar=acc.sidebar,
        links_vocabulary=acc.links_vocabulary,
        leaf_nodes=tuple(acc.leaf_nodes),
        redirects=acc.redirects,
        src_exclude=tuple(acc.src_exclude),
    )


def _log_failure(failure: ImportFailure) -> None:
    logger.error("Error in node {}: {}", failure.key, ", ".join(failure.errors))


def resolve_config(
    results: Iterable[ImportResult],
    *,
    base_url: str = DEFAULT_BASE_URL,
    on_failure: Callable[[ImportFailure], None] | None = None,
) -> ResolvedConfig:
    """Resolve navigation from one import snapshot.

    Failed notes are reported to ``on_failure`` (logged by default) and left
    out; the rest is resolved.

    Raises:
        EmptyCorpusError: If no note was imported successfully.
    """
    report = on_failure or _log_failure
    successes: list[ImportSuccess] = []
    failures: list[ImportFailure] = []
    for result in results:
        if isinstance(result, ImportFailure):
            report(result)
            failures.append(result)
        else:
            successes.append(result)

    if not successes:
        msg = "No valid nodes found to build the configuration."
        raise EmptyCorpusError(msg)

    config = resolve_hierarchy(build_repository(successes), base_url=base_url)
    return dataclasses.replace(config, import_failures=tuple(failures))
