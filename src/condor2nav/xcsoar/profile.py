"""ProfileStore — reads and writes XCSoar ``.prf`` profile files.

A profile is a flat list of ``Key=Value`` lines. Line order is kept and lines
that are not key/value pairs (comments, blanks) are written back unchanged,
so a profile can be round-tripped with only the translated keys modified.
"""

from __future__ import annotations

from pathlib import Path

OUTPUT_PROFILE_NAME = "Condor.prf"


class ProfileStore:
    """Ordered key/value store backed by profile lines.

    Args:
        lines: Existing profile lines (without line terminators).
    """

    def __init__(self, lines: list[str] | None = None) -> None:
        self._lines: list[str] = []
        self._index: dict[str, int] = {}
        for line in lines or []:
            self._append_line(line)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> ProfileStore:
        """Read the profile at *path*; a missing file gives an empty store."""
        p = Path(path)
        if not p.exists():
            return cls()
        return cls(p.read_text(encoding="utf-8", errors="replace").splitlines())

    def get(self, key: str, default: str | None = None) -> str | None:
        idx = self._index.get(key)
        if idx is None:
            return default
        return self._lines[idx].split("=", 1)[1]

    def set(self, key: str, value: str) -> None:
        """Set *key*, replacing an existing line in place or appending a new one."""
        line = f"{key}={value}"
        idx = self._index.get(key)
        if idx is None:
            self._index[key] = len(self._lines)
            self._lines.append(line)
        else:
            self._lines[idx] = line

    def update(self, pairs) -> None:
        """Set every ``(key, value)`` pair from *pairs* in order."""
        for key, value in pairs:
            self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return key in self._index

    def lines(self) -> list[str]:
        return list(self._lines)

    def as_dict(self) -> dict[str, str]:
        return {key: self.get(key) for key in self._index}

    def dump(self, path: str | Path) -> None:
        Path(path).write_text("\n".join(self._lines) + "\n", encoding="utf-8")

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _append_line(self, line: str) -> None:
        line = line.rstrip("\r\n")
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key and not key.startswith("#"):
            # later duplicates win, as when XCSoar reads the file
            self.set(key, value)
        else:
            self._lines.append(line)


def scenery_time_values() -> list[tuple[str, str]]:
    """Profile values that make XCSoar take the time of day from the simulator's GPS feed."""
    return [("UTCOffset", "0")]
