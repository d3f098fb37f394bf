"""Practice history persistence (JSON + fcntl.flock + atomic write)."""

import fcntl
import json
import os
import tempfile
from pathlib import Path

import structlog

from pte_practice.models.practice import HistoryEntry

logger = structlog.get_logger()

HISTORY_FILENAME = "practice_history.json"
HISTORY_LIMIT = 100


def _write_entries(history_path: Path, entries: list[dict]) -> None:
    with tempfile.NamedTemporaryFile(
        "w", dir=history_path.parent, delete=False, suffix=".json"
    ) as tmp:
        try:
            json.dump(entries, tmp, indent=2)
        except Exception:
            tmp.close()
            os.unlink(tmp.name)
            raise
    os.replace(tmp.name, history_path)


def _load_entries(history_path: Path) -> list[dict]:
    """Raw saved entries; a corrupted file counts as empty so new saves still land."""
    if not history_path.exists():
        return []
    try:
        entries = json.loads(history_path.read_text())
    except ValueError:
        entries = None
    if not isinstance(entries, list):
        logger.warning("history_parse_error", path=str(history_path))
        return []
    return entries


def append_history_entry(
    history_dir: Path,
    entry: HistoryEntry,
    limit: int = HISTORY_LIMIT,
    filename: str = HISTORY_FILENAME,
) -> None:
    """Prepend an entry to the history file, keeping the newest ``limit``."""
    history_path = history_dir / filename

    lock_path = history_dir / (filename + ".lock")
    with open(lock_path, "w") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)

        entries = _load_entries(history_path)
        entries.insert(0, entry.model_dump(mode="json"))
        _write_entries(history_path, entries[:limit])

    logger.info("history_saved", entry_id=entry.id, type=str(entry.type))


def read_history(history_dir: Path, filename: str = HISTORY_FILENAME) -> list[HistoryEntry]:
    """Read saved entries, newest first. Returns an empty list if not found."""
    history_path = history_dir / filename
    if not history_path.exists():
        return []
    return [HistoryEntry(**item) for item in json.loads(history_path.read_text())]


def clear_history(history_dir: Path, filename: str = HISTORY_FILENAME) -> None:
    history_path = history_dir / filename
    lock_path = history_dir / (filename + ".lock")
    with open(lock_path, "w") as lock_file:
        fcntl.flock(lock_file, fcntl.LOCK_EX)
        history_path.unlink(missing_ok=True)
    logger.info("history_cleared")
