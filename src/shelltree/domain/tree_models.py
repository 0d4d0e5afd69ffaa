from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the node types rebuilt from a shell transcript. Directories own
their children through ordered lists; the parent link is a weak reference
so a subtree never keeps its ancestors alive.
"""

import weakref
from dataclasses import dataclass
from typing import Iterator, List, Optional

from shelltree.domain.errors import NavigationError

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """
    Represents a leaf entry (file) reported by an ls listing.

    Attributes:
        name: File name as printed in the listing.
        size: Size in bytes.
    """
    name: str
    size: int


class Directory:
    """
    Represents a directory node in the reconstructed tree.

    Attributes:
        name: Directory name, unique only among siblings created through cd.
        subdirectories: Owned child directories in discovery order.
        files: Owned files in discovery order.
    """

    def __init__(self, name: str, parent: Optional[Directory] = None) -> None:
        self.name = name
        self.subdirectories: List[Directory] = []
        self.files: List[File] = []
        self._parent_ref: Optional[weakref.ReferenceType[Directory]] = (
            weakref.ref(parent) if parent is not None else None
        )

    def __repr__(self) -> str:
        return (
            f"Directory(name={self.name!r}, "
            f"subdirectories={len(self.subdirectories)}, files={len(self.files)})"
        )

    @property
    def parent(self) -> Optional[Directory]:
        """The directory this one was attached to, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def path(self) -> str:
        """Slash-joined location of this directory from the root."""
        parts: List[str] = []
        node: Optional[Directory] = self
        while node is not None:
            parts.append(node.name)
            node = node.parent
        parts.reverse()

        if not parts or parts[0] != "/":
            return "/".join(parts)
        return "/" + "/".join(parts[1:])

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def has_subdirectory(self, name: str) -> bool:
        """Check whether a direct child directory carries the given name."""
        return any(d.name == name for d in self.subdirectories)

    def subdirectory_named(self, name: str) -> Directory:
        """
        Return the first direct child directory with the given name.

        Raises:
            NavigationError: If no child directory has that name.
        """
        for d in self.subdirectories:
            if d.name == name:
                return d
        raise NavigationError(f"Directory '{name}' not found in '{self.path}'")

    # -------------------------------------------------------------------------
    # Mutation (interpreter only)
    # -------------------------------------------------------------------------

    def add_subdirectory(self, name: str) -> Directory:
        child = Directory(name, parent=self)
        self.subdirectories.append(child)
        return child

    def add_file(self, name: str, size: int) -> File:
        entry = File(name=name, size=size)
        self.files.append(entry)
        return entry

    # -------------------------------------------------------------------------
    # Traversal
    # -------------------------------------------------------------------------

    def walk(self) -> Iterator[Directory]:
        """
        Yield this directory and every descendant in pre-order.

        Uses an explicit stack so very deep trees do not depend on the
        interpreter recursion limit.
        """
        stack: List[Directory] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.subdirectories))

    def total_size(self) -> int:
        """
        Sum the sizes of all files in this directory and its descendants.

        Recomputed on every call; nothing is cached.
        """
        return sum(f.size for node in self.walk() for f in node.files)
