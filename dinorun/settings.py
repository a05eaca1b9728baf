import json
import os

import pygame

from dinorun.logger import get_logger

log = get_logger("settings")


class Settings:
    SETTINGS_FILE = os.environ.get("DINORUN_SETTINGS_FILE", "data/settings.json")

    def __init__(self):
        # Default settings
        self._fullscreen = False
        self._cutscene_enabled = True
        self._target_fps = 60
        self._rng_seed: int | None = None
        self.high_score_file = "data/high_score.json"
        self._dirty = False
        # Key bindings use pygame key integers for backend simplicity
        self.key_bindings = {
            "RunnerState": {
                "jump": [pygame.K_SPACE, pygame.K_UP],
                "restart": [pygame.K_SPACE, pygame.K_RETURN],
                "pause_toggle": [pygame.K_ESCAPE],
            },
            "PauseState": {
                "pause_close": [pygame.K_ESCAPE],
                "quit": [pygame.K_q],
            },
        }
        self.load_settings()

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @fullscreen.setter
    def fullscreen(self, value: bool) -> None:
        new_val = bool(value)
        if new_val != self._fullscreen:
            self._fullscreen = new_val
            self._dirty = True
            self.flush()

    @property
    def cutscene_enabled(self) -> bool:
        return self._cutscene_enabled

    @cutscene_enabled.setter
    def cutscene_enabled(self, value: bool) -> None:
        new_val = bool(value)
        if new_val != self._cutscene_enabled:
            self._cutscene_enabled = new_val
            self._dirty = True
            self.flush()

    @property
    def target_fps(self) -> int:
        return self._target_fps

    @target_fps.setter
    def target_fps(self, value: int) -> None:
        new_val = max(1, min(240, int(value)))
        if new_val != self._target_fps:
            self._target_fps = new_val
            self._dirty = True
            self.flush()

    @property
    def rng_seed(self) -> int | None:
        return self._rng_seed

    @rng_seed.setter
    def rng_seed(self, value: int | None) -> None:
        if value != self._rng_seed:
            self._rng_seed = value
            self._dirty = True
            self.flush()

    def load_settings(self):
        """Load settings from the JSON file."""
        if os.path.exists(self.SETTINGS_FILE):
            try:
                with open(self.SETTINGS_FILE, "r") as f:
                    data = json.load(f)
                self._fullscreen = bool(data.get("fullscreen", self._fullscreen))
                self._cutscene_enabled = bool(data.get("cutscene_enabled", self._cutscene_enabled))
                self._target_fps = int(data.get("target_fps", self._target_fps))
                self._rng_seed = data.get("rng_seed", self._rng_seed)
                self.high_score_file = data.get("high_score_file", self.high_score_file)

                # Deep merge so defaults survive for actions missing from the file
                loaded_bindings = data.get("key_bindings", {})
                for state, binds in loaded_bindings.items():
                    if state in self.key_bindings:
                        for action, keys in binds.items():
                            self.key_bindings[state][action] = list(keys)
            except (json.JSONDecodeError, TypeError, ValueError, AttributeError, OSError) as e:
                log.warn("Error loading settings; regenerating", e)
                self._dirty = True
                self.flush()
        else:
            self._dirty = True
            self.flush()

    def flush(self):
        """Write settings to disk if dirty and clear dirty flag."""
        if not self._dirty:
            return
        data = {
            "fullscreen": self._fullscreen,
            "cutscene_enabled": self._cutscene_enabled,
            "target_fps": self._target_fps,
            "rng_seed": self._rng_seed,
            "high_score_file": self.high_score_file,
            "key_bindings": self.key_bindings,
        }
        try:
            directory = os.path.dirname(self.SETTINGS_FILE)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.SETTINGS_FILE, "w") as f:
                json.dump(data, f, indent=4)
            self._dirty = False
            log.debug("Settings flushed")
        except OSError as e:
            log.error("Error saving settings", e)


settings = Settings()
