"""ASCII tree-style exporter for dependency snapshots."""

from pathlib import Path
from typing import List, Optional, Set, Tuple

from graph.model import ModuleId, Snapshot


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "
UNICODE_VERTICAL = "│   "
UNICODE_SPACE = "    "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "
ASCII_VERTICAL = "|   "
ASCII_SPACE = "    "


def to_ascii(
    snapshot: Snapshot,
    base: Optional[Path] = None,
    style: str = "tree",
    show_all: bool = False,
) -> str:
    """
    Render a snapshot as dependency trees.

    Each tree starts at a module nothing uses and descends through its
    dependencies. Modules no such tree reaches, such as detached cycles,
    start trees of their own. A module already on the current branch is
    marked ``[*]`` and not expanded again; a dependency with no record of
    its own is marked ``[UNTRACKED]``.

    Args:
        snapshot: The snapshot to export.
        base: Optional base path for relative path display.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).
        show_all: If True, include modules with no connections. Default False.

    Returns:
        ASCII tree string.
    """
    if style == "ascii":
        chars = (ASCII_BRANCH, ASCII_LAST, ASCII_VERTICAL, ASCII_SPACE)
    else:
        chars = (UNICODE_BRANCH, UNICODE_LAST, UNICODE_VERTICAL, UNICODE_SPACE)

    if show_all:
        modules = set(snapshot)
    else:
        modules = {
            module_id for module_id, record in snapshot.items()
            if record.dependencies or record.used_by
        }

    root_modules = sorted(m for m in modules if not snapshot[m].used_by)

    # Modules only reachable through a cycle get a tree of their own
    pending = root_modules + sorted(m for m in modules if snapshot[m].used_by)

    lines: List[str] = []
    reached: Set[ModuleId] = set()

    for module_id in pending:
        if module_id in reached:
            continue
        if lines:
            lines.append("")

        _render_module(
            snapshot=snapshot,
            module_id=module_id,
            base=base,
            prefix="",
            is_last=True,
            chars=chars,
            visited=set(),
            reached=reached,
            lines=lines,
            is_root=True,
        )

    return "\n".join(lines)


def _render_module(
    snapshot: Snapshot,
    module_id: ModuleId,
    base: Optional[Path],
    prefix: str,
    is_last: bool,
    chars: Tuple[str, str, str, str],
    visited: Set[ModuleId],
    reached: Set[ModuleId],
    lines: List[str],
    is_root: bool = False,
) -> None:
    """Recursively render a module and its dependencies into ``lines``."""
    branch, last, vertical, space = chars

    reached.add(module_id)
    display_path = get_display_path(module_id, base)
    record = snapshot.get(module_id)

    is_cycle = module_id in visited
    if is_cycle:
        marker = " [*]"
    elif record is None:
        marker = " [UNTRACKED]"
    else:
        marker = ""

    if is_root:
        lines.append(f"{display_path}{marker}")
    else:
        connector = last if is_last else branch
        lines.append(f"{prefix}{connector}{display_path}{marker}")

    if is_cycle or record is None:
        return

    visited.add(module_id)

    if is_root:
        child_prefix = ""
    else:
        child_prefix = prefix + (space if is_last else vertical)

    children = sorted(record.dependencies)
    for index, child in enumerate(children):
        _render_module(
            snapshot=snapshot,
            module_id=child,
            base=base,
            prefix=child_prefix,
            is_last=(index == len(children) - 1),
            chars=chars,
            visited=visited,
            reached=reached,
            lines=lines,
        )

    # Allow the same module to appear again on other branches
    visited.discard(module_id)


def get_display_path(module_id: ModuleId, base: Optional[Path]) -> str:
    """Get the display path for a module, relative to ``base`` when possible."""
    if base is not None:
        try:
            return Path(module_id).relative_to(base).as_posix()
        except ValueError:
            pass
    return module_id.replace("\\", "/")
