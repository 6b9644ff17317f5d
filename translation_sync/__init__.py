import logging
from typing import Any, Optional

from translation_sync.core.exceptions import (
    ConfigurationError,
    InvalidDirectoryError,
    InvalidLanguageError,
    LimitExceededError,
    MalformedDocumentError,
    MissingFileError,
    TranslationSyncError,
)
from translation_sync.i18n.config import SyncSettings, build_settings
from translation_sync.i18n.runner import run
from translation_sync.schemas.sync import FileDescriptor, RunResult

logger = logging.getLogger("translation_sync")


class TranslationSync:
    """Chainable handle: ``TranslationSync().edit_config(languages=["tr"]).run()``."""

    def __init__(self, settings: Optional[SyncSettings] = None):
        self._settings = settings

    @property
    def settings(self) -> SyncSettings:
        if self._settings is None:
            self._settings = build_settings()
        return self._settings

    def edit_config(self, **options: Any) -> "TranslationSync":
        current = self._settings.model_dump() if self._settings is not None else {}
        self._settings = build_settings(**{**current, **options})
        return self

    def run(self) -> RunResult:
        try:
            settings = self.settings
        except ConfigurationError as e:
            logger.error(str(e))
            return RunResult(ok=False, errors=[str(e)])

        return run(settings)


translation_sync = TranslationSync()

__all__ = [
    "ConfigurationError",
    "FileDescriptor",
    "InvalidDirectoryError",
    "InvalidLanguageError",
    "LimitExceededError",
    "MalformedDocumentError",
    "MissingFileError",
    "RunResult",
    "SyncSettings",
    "TranslationSync",
    "TranslationSyncError",
    "build_settings",
    "run",
    "translation_sync",
]
