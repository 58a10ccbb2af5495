#!/usr/bin/env python3
"""Drive connectivity check

Verifies the service account credentials against the configured store:
lists the visible shared drives, then resolves a folder path in the
workspace (read-only unless --ensure is given).

Usage:
    cd backend
    uv run python scripts/drive_check.py
    uv run python scripts/drive_check.py --path "Spring Launch/Email" --workspace <id>
    uv run python scripts/drive_check.py --path "Sandbox/Check" --ensure
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.components.drive import DriveError, build_drive_context, ensure_folder_path, resolve_folder_path
from app.utils import get_logger

logger = get_logger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Check Google Drive access")
    parser.add_argument("--workspace", help="Workspace id (defaults to GOOGLE_WORKSPACE_ID)")
    parser.add_argument("--path", default="", help="Folder path to resolve")
    parser.add_argument("--ensure", action="store_true", help="Create missing folders on the path")
    args = parser.parse_args()

    try:
        ctx = build_drive_context(args.workspace)
        drives = ctx.store.list_drives()
        logger.info(f"✅ {len(drives)} shared drives visible")
        for drive in drives:
            logger.info(f"   {drive.id}  {drive.name}")

        if args.ensure:
            result = ensure_folder_path(ctx, args.path)
            logger.info(f"✅ {result.path} -> {result.folderId} (created: {result.createdFolders or 'none'})")
        else:
            result = resolve_folder_path(ctx, args.path)
            status = "exists" if result.exists else "missing"
            logger.info(f"{'✅' if result.exists else '⚠️ '} {result.path} {status} {result.folderId}")
    except DriveError as e:
        logger.error(f"❌ {e.title}: {e.message}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
