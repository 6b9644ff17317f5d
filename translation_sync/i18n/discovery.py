import logging
from pathlib import Path
from typing import Iterable

from translation_sync.core.exceptions import ConfigurationError, LimitExceededError
from translation_sync.schemas.sync import FileDescriptor

logger = logging.getLogger("translation_sync.discovery")


def file_extension(name: str) -> str:
    return Path(name).suffix.lower().replace(".", "", 1)


def discover(
    root: Path, main_language: str, allowed_extensions: Iterable[str], max_count: int
) -> list[FileDescriptor]:
    """Index the translation files under ``root/main_language``.

    Walks depth first in the order the file system lists entries, which is
    not sorted and differs between platforms. Raises LimitExceededError as
    soon as more than ``max_count`` files are found.
    """
    main_dir = Path(root) / main_language
    if not main_dir.is_dir():
        raise ConfigurationError(f"Main language folder not found at: {main_dir}")

    allowed = {ext.lower() for ext in allowed_extensions}
    found: list[FileDescriptor] = []

    def explore(relative_path: tuple[str, ...]):
        current_dir = main_dir.joinpath(*relative_path)
        logger.debug(f"Exploring path: {current_dir}")

        for entry in current_dir.iterdir():
            if entry.is_dir():
                explore((*relative_path, entry.name))
                continue

            if file_extension(entry.name) not in allowed:
                continue

            found.append(FileDescriptor(relative_path=relative_path, filename=entry.name))
            if len(found) > max_count:
                raise LimitExceededError(
                    f"Exceeded maximum file exploration size of {max_count}. Stopped program"
                )

    explore(())
    return found
