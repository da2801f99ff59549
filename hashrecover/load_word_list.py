"""Logic for reading candidate names from plain text word lists."""

from pathlib import Path


def load_word_list(path: str | Path) -> list[str]:
    """Read one name per line, skipping blanks and '#' comments."""
    names = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        name = line.strip()
        if name and not name.startswith("#"):
            names.append(name)
    return names
