import json
from pathlib import Path
from typing import Any, Optional

from translation_sync.common.constants import EMPTY_DOCUMENT, JSON_INDENT
from translation_sync.core.exceptions import (
    InvalidDirectoryError,
    InvalidLanguageError,
    MalformedDocumentError,
    MissingFileError,
)
from translation_sync.i18n.config import SyncSettings
from translation_sync.i18n.journal import SyncJournal
from translation_sync.schemas.sync import FileDescriptor


def resolve(
    settings: SyncSettings,
    descriptor: FileDescriptor,
    language: Optional[str] = None,
    journal: Optional[SyncJournal] = None,
) -> Optional[Path]:
    """
    Absolute path of ``descriptor`` inside a language folder.

    - language None (or the main language) resolves the source file.
    - Missing directories are created, for the main language as well.
    - A missing target language file is created as an empty document.
    - Returns None when the file still does not exist.
    """
    if language == settings.main_language:
        language = None

    if language is not None and language not in settings.languages:
        raise InvalidLanguageError(f"Invalid language supplied: {language}")

    lang = language or settings.main_language
    directory = settings.language_dir(lang).joinpath(*descriptor.relative_path)
    file_path = directory / descriptor.filename

    if not directory.exists():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (FileExistsError, NotADirectoryError) as e:
            raise InvalidDirectoryError(f"Invalid directory: {directory}") from e

    if not directory.is_dir():
        raise InvalidDirectoryError(f"Invalid directory: {directory}")

    if not file_path.exists() and language is not None:
        file_path.write_text(EMPTY_DOCUMENT, encoding="utf-8")
        if journal is not None:
            journal.record(f"Created missing file {file_path}", lang)

    if file_path.exists():
        return file_path.resolve()

    return None


def load(
    path: Optional[Path],
    language: Optional[str] = None,
    journal: Optional[SyncJournal] = None,
) -> dict[str, Any]:
    if path is None or not path.exists():
        name = path.name if path is not None else "<missing>"
        raise MissingFileError(f"Can't read file {name}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        if journal is not None:
            journal.record(f"Invalid JSON data in file {path}", language)
        raise MalformedDocumentError(
            f"Can't parse file {language or 'main'} - {path.name}"
        ) from e

    if not isinstance(data, dict):
        if journal is not None:
            journal.record(f"Expected a JSON object in file {path}", language)
        raise MalformedDocumentError(
            f"Can't parse file {language or 'main'} - {path.name}: expected a JSON object"
        )

    return data


def save(path: Path, content: dict[str, Any]):
    path.write_text(
        json.dumps(content, ensure_ascii=False, indent=JSON_INDENT), encoding="utf-8"
    )
