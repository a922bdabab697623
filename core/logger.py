import json
import os
from datetime import datetime

LOG_FILE = os.getenv("LOG_FILE", "log.json")


def configure(log_file) -> None:
    global LOG_FILE
    LOG_FILE = str(log_file)


def log_event(event_type: str, message: str, extra: dict = None):
    """
    Logs events to a JSON file for debugging & monitoring.
    """
    entry = {
        "time": datetime.now().isoformat(),
        "type": event_type,
        "message": message
    }
    if extra:
        entry["extra"] = extra

    try:
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str) + "\n")
    except OSError as e:
        print(f"Log write error: {e}")
