"""OutputWriter — commits generated XCSoar files all-or-nothing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

_logger = logging.getLogger(__name__)

WP_FILE_NAME = "Condor.dat"

_TMP_SUFFIX = ".condor2nav-tmp"


class OutputWriter:
    """Write a set of text files into *output_dir*.

    Every file is first written next to its target under a temporary name;
    targets are only replaced once all temporary files exist. If any write
    fails the temporary files are removed and no target file is touched.

    Args:
        output_dir: Directory that receives the files (created if missing).
        newline: Line terminator. XCSoar reads both; CRLF matches files made
            on Windows.
    """

    def __init__(self, output_dir: str | Path, newline: str = "\r\n") -> None:
        self.output_dir = Path(output_dir)
        self.newline = newline

    def commit(self, files: dict[str, list[str]]) -> list[Path]:
        """Write *files* (name → lines) and return the final paths.

        Raises:
            OSError: If any file cannot be written; nothing is replaced then.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        staged: list[tuple[Path, Path]] = []
        try:
            for name, lines in files.items():
                target = self.output_dir / name
                tmp = target.with_name(target.name + _TMP_SUFFIX)
                staged.append((tmp, target))
                text = "".join(line + self.newline for line in lines)
                with open(tmp, "w", encoding="utf-8", newline="") as fh:
                    fh.write(text)
        except OSError:
            for tmp, _ in staged:
                tmp.unlink(missing_ok=True)
            raise

        for tmp, target in staged:
            os.replace(tmp, target)
            _logger.info("Wrote %s", target)
        return [target for _, target in staged]
