# Custom exceptions and logger setup
import json
import logging
import logging.config
import os
from pathlib import Path


class TranslationSyncError(Exception):
    pass


class ConfigurationError(TranslationSyncError):
    pass


class LimitExceededError(TranslationSyncError):
    pass


class InvalidDirectoryError(TranslationSyncError):
    pass


class MissingFileError(TranslationSyncError):
    pass


class MalformedDocumentError(TranslationSyncError):
    pass


class InvalidLanguageError(TranslationSyncError):
    pass


def expand_env(obj):
    if isinstance(obj, dict):
        return {k: expand_env(v) for k, v in obj.items()}

    elif isinstance(obj, list):
        return [expand_env(i) for i in obj]

    elif isinstance(obj, str) and obj.startswith("${") and obj.endswith("}"):
        expr = obj[2:-1]

        # Support default values: ${VAR:DEFAULT}
        if ":" in expr:
            name, default = expr.split(":", 1)
            return os.getenv(name, default)

        return os.getenv(expr, "")

    return obj


def setup_logger(config_path: Path | None = None):
    try:
        if config_path is None:
            config_path = Path(__file__).resolve().parent.parent / "logging.json"
        with open(config_path) as f:
            raw = json.load(f)

        config = expand_env(raw)
        logging.config.dictConfig(config)

        return logging.getLogger("translation_sync")

    except (OSError, ValueError, TypeError) as e:
        # Fallback basic logger
        print("\n================ LOGGING SETUP ERROR ================\n")
        print(f"Error while loading logging.json: {e}\n")
        print("Falling back to basic console logger...\n")
        print("=====================================================\n")

        fallback = logging.getLogger("translation_sync")
        fallback.setLevel(logging.INFO)

        if not fallback.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.INFO)
            formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            fallback.addHandler(handler)

        fallback.error(f"Failed to load logging config. Using fallback. Error: {e}")

        return fallback
