"""Folder path resolution over the remote store.

A logical path such as "Documents/Projects/2024" is walked one segment at a
time from the workspace root, with one name-filtered listing per segment.

When several folders share a name under the same parent, the earliest
created one wins (listings are ordered by createdTime).
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from app.components.drive.models import (
    DriveContext,
    DriveItem,
    PathMaterialization,
    PathResolution,
)

logger = logging.getLogger(__name__)

ROOT_PATH = "/"
TIE_BREAK_ORDER = "createdTime"

# (workspace id, normalized path) -> [lock, holders]; an entry lives only while held or awaited
_path_locks: dict[tuple[str, str], list] = {}
_path_locks_guard = threading.Lock()


def split_path(folder_path: str | None) -> list[str]:
    """Split a slash-delimited path into its non-blank segments.

    Examples:
        split_path("A/B/C") -> ["A", "B", "C"]
        split_path("/A//B/") -> ["A", "B"]
        split_path("   ") -> []
    """
    if not folder_path or not folder_path.strip():
        return []
    return [segment for segment in folder_path.split("/") if segment.strip()]


@contextmanager
def _path_lock(workspace_id: str, segments: list[str]) -> Iterator[None]:
    """Serialize materialization of one path within this process."""
    key = (workspace_id, "/".join(segments))
    with _path_locks_guard:
        entry = _path_locks.setdefault(key, [threading.Lock(), 0])
        entry[1] += 1

    try:
        with entry[0]:
            yield
    finally:
        with _path_locks_guard:
            entry[1] -= 1
            if entry[1] == 0:
                del _path_locks[key]


def find_child_folder(ctx: DriveContext, parent_id: str, name: str) -> DriveItem | None:
    """Find a child folder by exact name, earliest created first."""
    matches = ctx.store.list_children(parent_id, name=name, kind="folder", order_by=TIE_BREAK_ORDER)
    if not matches:
        return None
    if len(matches) > 1:
        logger.debug(f"{len(matches)} folders named '{name}' under {parent_id}, using {matches[0].id}")
    return matches[0]


def resolve_folder_path(ctx: DriveContext, folder_path: str | None) -> PathResolution:
    """Resolve a folder path to a folder id without creating anything.

    Args:
        ctx: Workspace and store to resolve against
        folder_path: Path like "Documents/Projects/2024"; empty means the root

    Returns:
        PathResolution with the folder id when every segment exists, otherwise
        an empty folder id, the path walked up to the first missing segment
        and exists=False
    """
    segments = split_path(folder_path)
    if not segments:
        return PathResolution(folderId=ctx.workspace_id, path=ROOT_PATH, exists=True)

    current_id = ctx.workspace_id
    current_path = ""
    for segment in segments:
        current_path += f"/{segment}"
        folder = find_child_folder(ctx, current_id, segment)
        if folder is None:
            return PathResolution(folderId="", path=current_path, exists=False)
        current_id = folder.id

    return PathResolution(folderId=current_id, path=current_path, exists=True)


def ensure_folder_path(ctx: DriveContext, folder_path: str | None) -> PathMaterialization:
    """Resolve a folder path, creating every missing segment along the way.

    Not transactional: when a creation fails midway, the segments created
    before it stay in place and a later call resumes from them.

    Args:
        ctx: Workspace and store to materialize in
        folder_path: Path like "Documents/Projects/2024"

    Returns:
        PathMaterialization with the final folder id and the names of the
        folders that had to be created
    """
    segments = split_path(folder_path)
    if not segments:
        return PathMaterialization(folderId=ctx.workspace_id, path=ROOT_PATH, exists=True)

    with _path_lock(ctx.workspace_id, segments):
        current_id = ctx.workspace_id
        current_path = ""
        created_folders: list[str] = []

        for segment in segments:
            current_path += f"/{segment}"
            folder = find_child_folder(ctx, current_id, segment)
            if folder is None:
                folder = ctx.store.create_folder(
                    segment,
                    current_id,
                    description=f"Auto-created folder for path: {current_path}",
                )
                created_folders.append(segment)
                logger.info(f"Created missing folder {current_path} ({folder.id})")
            current_id = folder.id

    return PathMaterialization(
        folderId=current_id,
        path=current_path,
        exists=True,
        created=bool(created_folders),
        createdFolders=created_folders,
    )
