import sys
from pathlib import Path

import click

from translation_sync import TranslationSync
from translation_sync.core.exceptions import (
    ConfigurationError,
    TranslationSyncError,
    setup_logger,
)
from translation_sync.i18n.discovery import discover


def _collect_options(root, main_language, languages, file_types, max_db_size):
    options = {}
    if root:
        segments = []
        for part in root:
            segments.extend(Path(part).parts)
        options["root"] = segments
    if main_language:
        options["main_language"] = main_language
    if languages:
        options["languages"] = list(languages)
    if file_types:
        options["language_file_types"] = list(file_types)
    if max_db_size is not None:
        options["max_db_size"] = max_db_size
    return options


def _load(ctx: click.Context, **options) -> TranslationSync:
    try:
        return TranslationSync().edit_config(**options)
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx)


def sync_options(func):
    func = click.option(
        "--max-db-size", type=int, help="Max number of files to index"
    )(func)
    func = click.option(
        "--file-type", "file_types", multiple=True, help="Translation file extension"
    )(func)
    func = click.option(
        "-l", "--language", "languages", multiple=True, help="Language to sync into"
    )(func)
    func = click.option("-m", "--main-language", help="Source of truth language code")(
        func
    )
    func = click.option(
        "-r", "--root", multiple=True, help="Locales folder, e.g. public/locales"
    )(func)
    return func


@click.group()
def i18n():
    """i18n utilities"""


@i18n.command()
@sync_options
@click.option(
    "--continue-on-error",
    is_flag=True,
    help="Keep syncing the next files after a failure",
)
@click.pass_context
def sync(ctx, root, main_language, languages, file_types, max_db_size, continue_on_error):
    """Sync translation keys across all locales"""
    setup_logger()
    options = _collect_options(root, main_language, languages, file_types, max_db_size)
    if continue_on_error:
        options["continue_on_error"] = True

    handle = _load(ctx, **options)

    click.echo("🔄 Syncing translations…")
    result = handle.run()

    if not result.ok:
        click.echo(f"✖ Sync failed with {len(result.errors)} error(s):", err=True)
        for error in result.errors:
            click.echo(f"    - {error}", err=True)
        sys.exit(1)

    click.echo(f"✨ Synced {len(result.files)} file(s) into {result.synced} translation(s)")


@i18n.command("discover")
@sync_options
@click.pass_context
def discover_files(ctx, root, main_language, languages, file_types, max_db_size):
    """List the main language files a sync would process"""
    setup_logger()
    options = _collect_options(root, main_language, languages, file_types, max_db_size)
    settings = _load(ctx, **options).settings

    try:
        files = discover(
            settings.root_path,
            settings.main_language,
            settings.language_file_types,
            settings.max_db_size,
        )
    except (TranslationSyncError, OSError) as e:
        raise click.ClickException(str(e))

    click.echo(f"→ Found {len(files)} translation file(s).")
    for descriptor in files:
        click.echo(f"    - {descriptor}")


cli = click.CommandCollection(sources=[i18n])

if __name__ == "__main__":
    cli()
