import json
import logging
import os

logger = logging.getLogger(__name__)


class WireConfig:
    """
    Centralized configuration for the wire client.
    Reads from environment variables or defaults; instances may override any
    attribute and WireConfig.load() layers a JSON file on top.
    """

    # Remote end
    SERVER_URL = os.environ.get("WEBDRIVER_SERVER_URL", "http://localhost:4444/wd/hub")

    # Transport (seconds / threads)
    REQUEST_TIMEOUT = float(os.environ.get("WEBDRIVER_REQUEST_TIMEOUT", 60))
    MAX_WORKERS = int(os.environ.get("WEBDRIVER_MAX_WORKERS", 4))

    # Logging
    LOG_LEVEL = os.environ.get("WEBDRIVER_LOG_LEVEL", "INFO")

    # JSON override file
    CONFIG_PATH = os.environ.get("WEBDRIVER_CONFIG", os.path.join(os.getcwd(), "webdriver_config.json"))

    _KEYS = ("server_url", "request_timeout", "max_workers", "log_level")

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if key.lower() not in self._KEYS:
                raise TypeError(f"Unknown configuration key: {key}")
            setattr(self, key.upper(), value)

    @classmethod
    def load(cls, path=None) -> "WireConfig":
        """Environment defaults with the JSON file's keys applied on top, if the file exists."""
        path = path or cls.CONFIG_PATH
        if not os.path.exists(path):
            return cls()

        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid configuration file {path}: expected a JSON object")

        overrides = {}
        for key, value in data.items():
            if key.lower() in cls._KEYS:
                overrides[key.lower()] = value
            else:
                logger.warning("Ignoring unknown configuration key %r in %s", key, path)
        return cls(**overrides)

    def __repr__(self):
        fields = ", ".join(f"{k}={getattr(self, k.upper())!r}" for k in self._KEYS)
        return f"WireConfig({fields})"
