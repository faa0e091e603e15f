"""Prior-score store: the last run's score as a plain-text integer."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PriorScoreStore:
    """Reads and writes the previous run's score (``previous.txt``)."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def read(self) -> int | None:
        """Return the stored score, or None when missing or unparsable."""
        try:
            text = self.path.read_text().strip()
        except OSError as e:
            logger.debug("Could not read %s: %s", self.path, e)
            return None
        try:
            return int(text)
        except ValueError:
            logger.debug("Previous score file %s holds %r", self.path, text)
            return None

    def write(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(str(score))
        logger.debug("Saved score %d to %s", score, self.path)
