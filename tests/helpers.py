import os
from pathlib import Path


def write_entry(directory: Path, rel: str, lines, mtime=None) -> Path:
    """Write a .desktop file under directory and optionally pin its mtime."""
    p = Path(directory) / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    if mtime is not None:
        os.utime(p, (mtime, mtime))
    return p


def app_lines(name="Foo", exec_line="foo %U", *extra):
    return [
        "[Desktop Entry]",
        "Type=Application",
        f"Name={name}",
        f"Exec={exec_line}",
        *extra,
    ]
