"""Domain models for the Dendron navigation resolver."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Literal

LandingPoint = Literal["first", "last"]
LANDING_POINTS: tuple[LandingPoint, ...] = ("first", "last")


def key_level(key: str) -> int:
    """Number of dot-delimited segments in a document key."""
    return len(key.split("."))


def parent_key(key: str) -> str | None:
    """Key of the parent node, or None for a root-level key."""
    head, sep, _ = key.rpartition(".")
    return head if sep else None


@dataclass(frozen=True)
class DocEntryConfig:
    """Marks a node as a sidebar root."""

    landing_point: LandingPoint = "first"
    collapse_non_landing_children: bool = False


@dataclass(frozen=True)
class ImportSuccess:
    """A note whose frontmatter passed validation."""

    kind: ClassVar[str] = "success"

    key: str
    uid: str
    title: str
    created_at: datetime
    updated_at: datetime
    filename: str
    order: int | float = 999
    doc_entry_raw: Any = None


@dataclass(frozen=True)
class ImportFailure:
    """A note that could not be imported, with the reasons why."""

    kind: ClassVar[str] = "failure"

    key: str
    filename: str
    errors: tuple[str, ...]


ImportResult = ImportSuccess | ImportFailure


@dataclass(frozen=True)
class ImportedNode:
    """A node backed by a note file."""

    kind: ClassVar[str] = "imported"

    key: str
    uid: str
    title: str
    created_at: datetime
    updated_at: datetime
    filename: str
    link: str
    order: int | float = 999
    doc_entry_config: DocEntryConfig | None = None

    @property
    def level(self) -> int:
        return key_level(self.key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "uid": self.uid,
            "title": self.title,
            "order": self.order,
            "level": self.level,
            "link": self.link,
            "filename": self.filename,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class VirtualNode:
    """A placeholder for a hierarchy level no note file backs."""

    kind: ClassVar[str] = "virtual"

    key: str
    title: str
    order: int | float = 0
    doc_entry_config: None = None

    @property
    def uid(self) -> str:
        return self.key

    @property
    def level(self) -> int:
        return key_level(self.key)


ResolvedNode = ImportedNode | VirtualNode


@dataclass(frozen=True)
class NavLink:
    """Top navigation item pointing at a page."""

    kind: ClassVar[str] = "link"

    title: str
    link: str | None

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.title, "link": self.link}


@dataclass(frozen=True)
class NavBranch:
    """Top navigation item grouping other items."""

    kind: ClassVar[str] = "branch"

    title: str
    children: tuple["NavItem", ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.title, "items": [child.to_dict() for child in self.children]}


NavItem = NavLink | NavBranch


@dataclass(frozen=True)
class SidebarItem:
    """An entry of a sidebar tree.

    Leaves carry a link, branches carry children. ``collapsed`` is only set
    on the direct items of a sidebar root that collapses non-landing children.
    """

    key: str
    title: str
    link: str | None = None
    children: tuple["SidebarItem", ...] | None = None
    collapsed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"key": self.key, "text": self.title}
        if self.link is not None:
            result["link"] = self.link
        if self.children is not None:
            result["items"] = [child.to_dict() for child in self.children]
        if self.collapsed is not None:
            result["collapsed"] = self.collapsed
        return result


@dataclass(frozen=True)
class LeafDocument:
    """A leaf page together with the titles leading to it."""

    node: ImportedNode
    breadcrumbs: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {**self.node.to_dict(), "breadcrumbs": list(self.breadcrumbs)}


@dataclass(frozen=True)
class ResolvedConfig:
    """All navigation tables produced by one resolution run."""

    nav: tuple[NavItem, ...]
    sidebar: dict[str, tuple[SidebarItem, ...]]
    links_vocabulary: dict[str, str]
    leaf_nodes: tuple[LeafDocument, ...]
    redirects: dict[str, str]
    src_exclude: tuple[str, ...]
    import_failures: tuple[ImportFailure, ...] = field(default=())

    def link_label(self, label: str) -> str:
        """Title for a wiki-link label, or the label itself when unknown."""
        return self.links_vocabulary.get(label, label)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nav": [item.to_dict() for item in self.nav],
            "sidebar": {
                root: [item.to_dict() for item in items] for root, items in self.sidebar.items()
            },
            "linksVocabulary": dict(self.links_vocabulary),
            "leafNodes": [leaf.to_dict() for leaf in self.leaf_nodes],
            "redirects": dict(self.redirects),
            "srcExclude": list(self.src_exclude),
        }
