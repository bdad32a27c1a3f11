"""Split text files and URLs into chunk documents."""

from __future__ import annotations

import asyncio
import logging

import click

from ragsplit.chunking import InvalidConfigurationError, RecursiveCharacterSplitter, SplitterConfig
from ragsplit.config.base import LOG_LEVELS
from ragsplit.dtos import Document
from ragsplit.loaders import LoaderError, LoaderOptions, TextLoader

logger = logging.getLogger(__name__)


def _unescape(separator: str) -> str:
    r"""Turn shell-friendly escapes such as ``\n`` into the real characters."""
    return separator.encode("latin-1", "backslashreplace").decode("unicode_escape")


async def _load_sources(loader: TextLoader, paths: tuple[str, ...], urls: tuple[str, ...]) -> list[Document]:
    documents = await loader.load_multiple(list(paths))
    for url in urls:
        documents.append(await loader.load_url(url))
    return documents


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("--url", "urls", multiple=True, help="URL of a plain text document; may be repeated.")
@click.option("--chunk-size", type=int, default=None, help="Maximum chunk length in characters.")
@click.option("--chunk-overlap", type=int, default=None, help="Characters shared by adjacent chunks.")
@click.option(
    "--separator",
    "separators",
    multiple=True,
    help=r"Separator in priority order, escapes like \n allowed; may be repeated. Replaces the defaults.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to LOG_LEVEL).",
)
def split(
    paths: tuple[str, ...],
    urls: tuple[str, ...],
    chunk_size: int | None,
    chunk_overlap: int | None,
    separators: tuple[str, ...],
    log_level: str | None,
) -> None:
    """Split PATHS and --url sources, printing one JSON chunk per line."""
    from ragsplit.config import settings

    logging.basicConfig(
        level=(log_level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not paths and not urls:
        click.echo("Nothing to split: pass file paths or --url", err=True)
        raise SystemExit(1)

    try:
        config = SplitterConfig(
            chunk_size=settings.CHUNK_SIZE if chunk_size is None else chunk_size,
            chunk_overlap=settings.CHUNK_OVERLAP if chunk_overlap is None else chunk_overlap,
            separators=[_unescape(s) for s in separators] if separators else settings.CHUNK_SEPARATORS,
        )
    except InvalidConfigurationError as exc:
        click.echo(f"Invalid configuration: {exc}", err=True)
        raise SystemExit(1) from exc

    loader = TextLoader(LoaderOptions.from_settings(settings))
    splitter = RecursiveCharacterSplitter(config)

    try:
        documents = asyncio.run(_load_sources(loader, paths, urls))
        chunks = splitter.split(documents)
    except LoaderError as exc:
        click.echo(f"Failed to load {exc.source or 'source'}: {exc}", err=True)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        raise SystemExit(130) from None

    for chunk in chunks:
        click.echo(chunk.model_dump_json())

    logger.info("Split %d document(s) into %d chunk(s)", len(documents), len(chunks))
