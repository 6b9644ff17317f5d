import logging
from typing import Optional

from translation_sync.core.exceptions import TranslationSyncError
from translation_sync.i18n.config import SyncSettings
from translation_sync.i18n.discovery import discover
from translation_sync.i18n.journal import SyncJournal
from translation_sync.i18n.loader import resolve
from translation_sync.i18n.sync import sync_file
from translation_sync.schemas.sync import FileDescriptor, RunResult

logger = logging.getLogger("translation_sync.runner")


def _report(result: RunResult, journal: SyncJournal, error: Exception):
    message = str(error)
    logger.error(message)
    journal.record(message, echo=False)
    result.errors.append(message)
    result.ok = False


def _sync_descriptor(
    settings: SyncSettings,
    descriptor: FileDescriptor,
    journal: SyncJournal,
    result: RunResult,
):
    journal.record(
        f"Synchronization started for: {resolve(settings, descriptor, journal=journal)}"
    )
    for lang in settings.languages:
        sync_file(settings, descriptor, lang, journal)
        result.synced += 1


def run(settings: SyncSettings, journal: Optional[SyncJournal] = None) -> RunResult:
    """Discover every main language file and sync it into each target language.

    Errors never escape: they are logged, recorded in the journal and
    returned in the result. Files written before a failure stay written.
    """
    journal = journal or SyncJournal(settings.main_language)
    result = RunResult()

    try:
        result.files = discover(
            settings.root_path,
            settings.main_language,
            settings.language_file_types,
            settings.max_db_size,
        )

        for descriptor in result.files:
            try:
                _sync_descriptor(settings, descriptor, journal, result)
            except (TranslationSyncError, OSError) as e:
                if not settings.continue_on_error:
                    raise
                _report(result, journal, e)
    except (TranslationSyncError, OSError) as e:
        _report(result, journal, e)
    finally:
        try:
            result.log_file = journal.flush(settings.root_path)
        except OSError as e:
            logger.error(f"Could not write sync log: {e}")

    return result
