import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from translation_sync.common.constants import LOG_FILENAME, TIMESTAMP_FORMAT
from translation_sync.schemas.sync import LogEntry

logger = logging.getLogger("translation_sync.journal")


class SyncJournal:
    """Operation log of one run, newest entry first.

    Entries are echoed to the Python logger as they are recorded and written
    to ``<root>/TranslationSync.log`` once, when the run ends.
    """

    def __init__(self, main_language: str):
        self.main_language = main_language
        self.entries: list[LogEntry] = []

    def __len__(self):
        return len(self.entries)

    def record(
        self, message: str, language: Optional[str] = None, echo: bool = True
    ) -> LogEntry:
        entry = LogEntry(language=language or self.main_language, message=message)
        if echo:
            logger.info(entry.render())
        self.entries.insert(0, entry)
        return entry

    def render(self) -> str:
        separator = f"\n[{datetime.now().strftime(TIMESTAMP_FORMAT)}] Sync Started..."
        lines = [separator, *(entry.render() for entry in self.entries)]
        return "\n" + "\n".join(lines)

    def flush(self, root: Path) -> Optional[Path]:
        if not self.entries:
            return None

        if not root.is_dir():
            logger.warning(f"Locales root {root} not found, log was not written")
            return None

        log_file = root / LOG_FILENAME
        previous = ""
        if log_file.exists():
            previous = log_file.read_text(encoding="utf-8")

        # newest run goes on top of the file
        log_file.write_text(self.render() + previous, encoding="utf-8")
        self.entries.clear()

        return log_file
