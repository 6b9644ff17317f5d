from pathlib import Path
from typing import Any

from pydantic import PositiveInt, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings

from translation_sync.common.constants import (
    DEFAULT_FILE_TYPES,
    DEFAULT_LANGUAGES,
    DEFAULT_MAIN_LANGUAGE,
    DEFAULT_MAX_DB_SIZE,
    DEFAULT_ROOT,
    ENV_PREFIX,
)
from translation_sync.core.exceptions import ConfigurationError


class SyncSettings(BaseSettings):
    main_language: str = DEFAULT_MAIN_LANGUAGE
    # path to the locales folder, without the language code
    root: list[str] = DEFAULT_ROOT
    languages: list[str] = DEFAULT_LANGUAGES
    language_file_types: list[str] = DEFAULT_FILE_TYPES
    max_db_size: PositiveInt = DEFAULT_MAX_DB_SIZE
    continue_on_error: bool = False

    class Config:
        env_prefix = ENV_PREFIX
        env_file = ".env"
        extra = "ignore"

    @field_validator("main_language")
    @classmethod
    def main_language_not_blank(cls, value: str):
        value = value.strip()
        if not value:
            raise ValueError("Main language code can not be empty")
        return value

    @field_validator("root")
    @classmethod
    def root_not_empty(cls, value: list[str]):
        if not value:
            raise ValueError("Please provide at least 1 path segment for locales root")
        return value

    @field_validator("language_file_types")
    @classmethod
    def normalize_extensions(cls, value: list[str]):
        return [ext.strip().lower().lstrip(".") for ext in value if ext.strip()]

    @model_validator(mode="after")
    def exclude_main_language(self):
        others = []
        for lang in self.languages:
            lang = lang.strip()
            if lang and lang != self.main_language and lang not in others:
                others.append(lang)

        if not others:
            raise ValueError(
                "Please provide at least 1 other language excluding main language"
            )

        self.languages = others
        return self

    @property
    def root_path(self) -> Path:
        return Path(*self.root)

    def language_dir(self, lang: str | None = None) -> Path:
        return self.root_path / (lang or self.main_language)


def build_settings(**options: Any) -> SyncSettings:
    """Validate options into SyncSettings, raising ConfigurationError on bad input."""
    try:
        return SyncSettings(**options)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration - {details}") from e
