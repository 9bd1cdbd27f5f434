"""Command-line entry point: read a ``.rt`` scene file and dump its contents."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .parser import parse_file
from .report import format_scene
from .scene import SceneError

USAGE_ERROR = "Incorrect argument: ./miniRT file_name.rt"


def check_scene_path(argv: Sequence[str]) -> str:
    """The single scene path in ``argv``; it must end in ``.rt``."""
    if len(argv) != 1:
        raise SceneError(USAGE_ERROR)
    path = argv[0]
    if len(path) < 3 or not path.endswith(".rt"):
        raise SceneError(USAGE_ERROR)
    return path


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the scene named on the command line and print it; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        scene = parse_file(check_scene_path(argv))
    except SceneError as exc:
        sys.stdout.write(f"Error: {exc.message}\n")
        return exc.exit_code
    sys.stdout.write(format_scene(scene))
    return 0


if __name__ == "__main__":
    sys.exit(main())