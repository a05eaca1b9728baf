# high_score.py
import json
import os
from datetime import datetime

from dinorun.logger import get_logger

HIGH_SCORE_FILE = "data/high_score.json"

log = get_logger("high_score")


class JsonHighScoreStore:
    """Persists the single best score as a small JSON document."""

    def __init__(self, path: str = HIGH_SCORE_FILE):
        self.path = path

    def get_high_score(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r") as file:
                data = json.load(file)
        except (json.JSONDecodeError, OSError) as e:
            log.warn("Error reading high score file; treating best as 0", e)
            return 0
        value = data.get("high_score", 0) if isinstance(data, dict) else data
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            log.warn("Ignoring malformed high score value", repr(value))
            return 0
        return max(0, int(value))

    def set_high_score(self, value: int) -> None:
        data = {
            "high_score": int(value),
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as file:
                json.dump(data, file, indent=4, sort_keys=True)
            log.info("New high score saved", int(value))
        except OSError as e:
            log.error("Error saving high score", e)
