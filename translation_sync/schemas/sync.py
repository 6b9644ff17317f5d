from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from translation_sync.common.constants import TIMESTAMP_FORMAT


class FileDescriptor(BaseModel):
    """Identity of one translation file, shared by every language folder."""

    model_config = ConfigDict(frozen=True)

    relative_path: tuple[str, ...] = ()
    filename: str

    def __str__(self):
        return "/".join((*self.relative_path, self.filename))


class LogEntry(BaseModel):
    timestamp: datetime = Field(default_factory=datetime.now)
    language: str
    message: str

    def render(self) -> str:
        return f"[{self.timestamp.strftime(TIMESTAMP_FORMAT)}] [{self.language}] {self.message}"


class RunResult(BaseModel):
    ok: bool = True
    files: list[FileDescriptor] = []
    synced: int = 0
    errors: list[str] = []
    log_file: Optional[Path] = None
