from copy import deepcopy
from typing import Any, Optional, Sequence

from translation_sync.core.exceptions import MalformedDocumentError
from translation_sync.i18n.config import SyncSettings
from translation_sync.i18n.journal import SyncJournal
from translation_sync.i18n.loader import load, resolve, save
from translation_sync.schemas.sync import FileDescriptor


def _record(journal: Optional[SyncJournal], message: str, lang: str):
    if journal is not None:
        journal.record(message, lang)


def copy_deep(
    target: dict,
    value: Any,
    key_path: Sequence[str],
    lang: str,
    journal: Optional[SyncJournal] = None,
):
    """Write ``value`` at ``key_path`` unless the target already holds a non-null value.

    Intermediate keys that are missing, or hold something other than an
    object, are replaced with an empty object on the way down.
    """
    if not key_path:
        return

    *parents, last = key_path
    current = target

    for key in parents:
        if key not in current:
            _record(journal, f"Creating missing key [{key}]", lang)
            current[key] = {}
        elif not isinstance(current[key], dict):
            _record(journal, f"Writing over non-object property [{key}]", lang)
            current[key] = {}

        current = current[key]

    if last not in current or current[last] is None:
        current[last] = deepcopy(value)
        _record(journal, f"Writing over key [{last}]", lang)


def synchronize(
    source: dict,
    target: dict,
    lang: str,
    journal: Optional[SyncJournal] = None,
    prefix: tuple[str, ...] = (),
):
    for key, src_val in source.items():
        key_path = (*prefix, key)
        if isinstance(src_val, dict):
            synchronize(src_val, target, lang, journal, key_path)
        else:
            # scalars, nulls and arrays are leaves
            copy_deep(target, src_val, key_path, lang, journal)


def sync_file(
    settings: SyncSettings,
    descriptor: FileDescriptor,
    lang: str,
    journal: Optional[SyncJournal] = None,
):
    source_file = resolve(settings, descriptor, journal=journal)
    target_file = resolve(settings, descriptor, lang, journal)

    source_data = load(source_file, settings.main_language, journal)
    target_data = load(target_file, lang, journal)

    try:
        synchronize(source_data, target_data, lang, journal)
        save(target_file, target_data)
    except RecursionError as e:
        raise MalformedDocumentError(
            f"Document nested too deeply to sync: {lang} - {descriptor.filename}"
        ) from e
