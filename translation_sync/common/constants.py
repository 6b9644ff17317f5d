ENV_PREFIX = "TRANSLATION_SYNC_"

DEFAULT_MAIN_LANGUAGE = "en"
DEFAULT_ROOT = ["public", "locales"]
DEFAULT_LANGUAGES = ["tr", "es"]
DEFAULT_FILE_TYPES = ["json"]
# Max number of files to index, stops accidental indexing of e.g. node_modules
DEFAULT_MAX_DB_SIZE = 100

LOG_FILENAME = "TranslationSync.log"
TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"

EMPTY_DOCUMENT = "{}"
JSON_INDENT = "\t"
