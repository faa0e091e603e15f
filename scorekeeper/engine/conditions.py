"""Built-in condition kinds and the default condition evaluator.

Each kind is a handler ``(arg1, arg2, arg3) -> bool``.  Any kind can be
negated by appending ``Not`` to its name (``FileExistsNot``).  A handler
that hits an I/O, regex, subprocess or process-table error makes the
condition false, negated or not.

Kinds:
  FileExists(path)
  FileContains(path, text)
  FileContainsRegex(path, regex)       -- multiline search
  DirContains(dir, regex)              -- any regular file below dir
  FileEquals(path, sha256_hex)
  CommandContains(command, text)       -- stdout contains text
  CommandOutput(command, output)       -- stripped stdout equals output
  ProcessRunning(name)
"""

from __future__ import annotations

import hashlib
import logging
import re
import subprocess
from pathlib import Path
from typing import Callable, Mapping

import psutil

from scorekeeper.config.defaults import COMMAND_TIMEOUT_SECONDS, NEGATION_SUFFIX
from scorekeeper.engine.models import Condition

logger = logging.getLogger(__name__)

Handler = Callable[[str, str, str], bool]

_EVALUATION_ERRORS = (
    OSError,
    UnicodeError,
    re.error,
    subprocess.SubprocessError,
    psutil.Error,
)


# ---------------------------------------------------------------------------
# File system
# ---------------------------------------------------------------------------

def _read_text(path: str) -> str:
    return Path(path).read_text(errors="replace")


def file_exists(path: str, _arg2: str = "", _arg3: str = "") -> bool:
    return Path(path).exists()


def file_contains(path: str, text: str, _arg3: str = "") -> bool:
    return text in _read_text(path)


def file_contains_regex(path: str, pattern: str, _arg3: str = "") -> bool:
    return re.search(pattern, _read_text(path), re.MULTILINE) is not None


def dir_contains(directory: str, pattern: str, _arg3: str = "") -> bool:
    """True when any regular file under ``directory`` matches ``pattern``."""
    regex = re.compile(pattern, re.MULTILINE)
    root = Path(directory)
    if not root.is_dir():
        raise NotADirectoryError(directory)
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        try:
            if regex.search(path.read_text(errors="replace")):
                return True
        except OSError as e:
            logger.debug("Skipping unreadable file %s: %s", path, e)
    return False


def file_equals(path: str, sha256_hex: str, _arg3: str = "") -> bool:
    digest = hashlib.sha256(Path(path).read_bytes()).hexdigest()
    return digest == sha256_hex.strip().lower()


# ---------------------------------------------------------------------------
# Commands and processes
# ---------------------------------------------------------------------------

def _run_command(command: str) -> str:
    completed = subprocess.run(
        command,
        shell=True,
        capture_output=True,
        text=True,
        timeout=COMMAND_TIMEOUT_SECONDS,
    )
    return completed.stdout


def command_contains(command: str, text: str, _arg3: str = "") -> bool:
    return text in _run_command(command)


def command_output(command: str, output: str, _arg3: str = "") -> bool:
    return _run_command(command).strip() == output.strip()


def process_running(name: str, _arg2: str = "", _arg3: str = "") -> bool:
    for proc in psutil.process_iter(["name"]):
        if proc.info.get("name") == name:
            return True
    return False


BUILTIN_HANDLERS: dict[str, Handler] = {
    "FileExists": file_exists,
    "FileContains": file_contains,
    "FileContainsRegex": file_contains_regex,
    "DirContains": dir_contains,
    "FileEquals": file_equals,
    "CommandContains": command_contains,
    "CommandOutput": command_output,
    "ProcessRunning": process_running,
}


# ---------------------------------------------------------------------------
# Evaluator
# ---------------------------------------------------------------------------

class ConditionEvaluator:
    """Dispatch conditions to handlers by their ``type`` string.

    Usage::

        evaluator = ConditionEvaluator()
        evaluator(Condition("FileExistsNot", "/etc/backdoor"))

    Extra or replacement handlers can be passed as a mapping.
    """

    def __init__(self, handlers: Mapping[str, Handler] | None = None):
        self.handlers: dict[str, Handler] = dict(BUILTIN_HANDLERS)
        if handlers:
            self.handlers.update(handlers)

    def lookup(self, kind: str) -> tuple[Handler | None, bool]:
        """Return ``(handler, negated)`` for a condition type."""
        if kind in self.handlers:
            return self.handlers[kind], False
        if kind.endswith(NEGATION_SUFFIX):
            base = kind[: -len(NEGATION_SUFFIX)]
            if base in self.handlers:
                return self.handlers[base], True
        return None, False

    def evaluate(self, condition: Condition) -> bool:
        handler, negated = self.lookup(condition.type)
        if handler is None:
            logger.warning("Unknown condition type: %s", condition.type)
            return False
        try:
            result = handler(condition.arg1, condition.arg2, condition.arg3)
        except _EVALUATION_ERRORS as e:
            logger.debug("%s raised %s: %s", condition, type(e).__name__, e)
            return False
        return not result if negated else bool(result)

    __call__ = evaluate
