"""Command-line entry point: read a ``.rt`` scene and render it to a PPM image."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from minirt.parser import SceneParseError, load_scene
from minirt.render import render


def has_rt_suffix(name: str) -> bool:
    """Whether ``name`` ends with ``.rt``."""
    return len(name) >= 3 and name.endswith(".rt")


def log_status(where: str, message: str) -> None:
    """Write a status line to standard error."""
    print(f"miniRT: {where}: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the scene file given as the single argument; return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        log_status("main", "Argument num error")
        return 1
    name = args[0]
    if not has_rt_suffix(name):
        log_status("main", "file prefix Error")
        return 1
    try:
        scene = load_scene(name)
    except OSError:
        log_status("main", "Cannot open file")
        return 1
    except SceneParseError as exc:
        log_status(exc.where, exc.message)
        return 1
    log_status("app_init: camera_build_basis", "proceeded")
    frame = render(scene)
    output = Path(name).with_suffix(".ppm")
    try:
        frame.save(output)
    except OSError:
        log_status("main", f"Cannot write {output}")
        return 1
    log_status("render", f"saved {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())