# engine_core/logger.py
import json
from datetime import datetime
from pathlib import Path

from engine_core.config import get_config


def _log_path() -> Path:
    log_dir = Path(get_config().log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now().strftime("%Y-%m-%d")
    return log_dir / f"{date}.json"


def log_event(event_type, payload):
    """Append an event to today's JSON log."""
    entry = {
        "timestamp": datetime.now().isoformat(),
        "type": event_type,
        "payload": payload,
    }
    if not get_config().log_events:
        return entry

    path = _log_path()
    existing = []
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            try:
                existing = json.load(f)
            except json.JSONDecodeError:
                existing = []
    existing.append(entry)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(existing, f, indent=2, default=str)
    return entry
