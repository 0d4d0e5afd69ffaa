from __future__ import annotations

"""
Tree Renderer.

Converts a rebuilt Directory tree into an ASCII listing with sizes,
using the same connector scheme as a classic 'tree' command.
"""

from typing import List, Tuple, Union

from shelltree.domain.tree_models import Directory, File

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Directory, show_sizes: bool = True) -> List[str]:
    """
    Render the full tree, starting with a line for the root itself.

    Args:
        root: Directory to render.
        show_sizes: Append total sizes to directories and sizes to files.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines = [_dir_label(root, show_sizes)]
    render_tree_structure(root, lines, prefix="", show_sizes=show_sizes)
    return lines


def render_tree_structure(
        directory: Directory,
        lines: List[str],
        prefix: str = "",
        show_sizes: bool = True,
) -> None:
    """
    Append the descendants of a directory to the lines list.

    Subdirectories come first, then files, each in discovery order. Uses an
    explicit stack so very deep trees do not depend on the interpreter
    recursion limit.

    Args:
        directory: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the first level of children.
        show_sizes: Whether to annotate entries with sizes.
    """
    # Frames are (node, prefix, is_last); pushed in reverse to pop in order
    stack: List[Tuple[Union[Directory, File], str, bool]] = _child_frames(directory, prefix)

    while stack:
        node, node_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "

        # Scenario A: Node is a Directory
        if isinstance(node, Directory):
            lines.append(f"{node_prefix}{connector}{_dir_label(node, show_sizes)}")
            new_prefix = node_prefix + ("    " if is_last else "│   ")
            stack.extend(_child_frames(node, new_prefix))
            continue

        # Scenario B: Node is a File
        label = f"{node.name} ({node.size})" if show_sizes else node.name
        lines.append(f"{node_prefix}{connector}{label}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _dir_label(directory: Directory, show_sizes: bool) -> str:
    name = directory.name if directory.name.endswith("/") else f"{directory.name}/"
    if not show_sizes:
        return name
    return f"{name} ({directory.total_size()})"


def _child_frames(
        directory: Directory,
        prefix: str,
) -> List[Tuple[Union[Directory, File], str, bool]]:
    """Build stack frames for a directory's entries, last entry first."""
    entries: List[Union[Directory, File]] = [*directory.subdirectories, *directory.files]
    total = len(entries)
    frames = [(node, prefix, i == total - 1) for i, node in enumerate(entries)]
    frames.reverse()
    return frames
