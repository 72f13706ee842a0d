# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command line interface.

Usage:
    patternbook list [--category structural]
    patternbook run builder facade
    patternbook run --all [--category solid] [--timings]
    patternbook explain decorator [--source]
    patternbook docs ./docs/patterns
    patternbook version
"""

import importlib
import inspect
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

from patternbook import __version__
from patternbook.catalog import CatalogLoader, render_index, render_markdown
from patternbook.catalog.models import Catalog
from patternbook.config.settings import VALID_LOG_LEVELS, PatternbookSettings, get_settings
from patternbook.core.demo import DemoSpec, PatternCategory, load_builtin_demos
from patternbook.core.errors import ConfigurationError, PatternbookError
from patternbook.core.runner import DemoResult, DemoRunner

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    name="patternbook",
    help="Runnable SOLID and Gang-of-Four design pattern examples.",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

# Handlers installed by _configure_logging, removed on reconfiguration.
_installed_handlers: List[logging.Handler] = []


def _configure_logging(
    level: str,
    stream: Optional[TextIO] = None,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the root logger.

    Log records go to stderr (or ``stream``) so that demo output on stdout
    stays byte-for-byte comparable.

    Args:
        level: Logging level name
        stream: Stream for the console handler (default: sys.stderr)
        log_file: Optional file receiving the same records
    """
    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        root.addHandler(handler)
    root.setLevel(level.upper())


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False)
    return typer.Exit(code=1)


def _settings() -> PatternbookSettings:
    try:
        return get_settings()
    except ConfigurationError as e:
        raise _fail(e.message)


def _load_catalog(settings: PatternbookSettings) -> Catalog:
    try:
        return CatalogLoader(settings.catalog_path).load()
    except PatternbookError as e:
        raise _fail(str(e))


def _demo_source(spec: DemoSpec) -> str:
    return inspect.getsource(importlib.import_module(spec.module))


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides PATTERNBOOK_LOG_LEVEL.",
    ),
) -> None:
    """Runnable SOLID and Gang-of-Four design pattern examples."""
    settings = _settings()
    level = (log_level or settings.log_level).upper()
    if level not in VALID_LOG_LEVELS:
        raise _fail(f"Unknown log level: {log_level}")
    _configure_logging(level, log_file=settings.log_file)
    console.no_color = not settings.color
    err_console.no_color = not settings.color


@app.command("list")
def list_demos(
    category: Optional[PatternCategory] = typer.Option(
        None, "--category", "-c", help="Only show one category."
    ),
) -> None:
    """List available demos."""
    specs = load_builtin_demos().list_specs(category)

    table = Table(title="Demos", show_lines=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Category", style="magenta")
    for spec in specs:
        table.add_row(spec.key, spec.title, spec.category.value)
    console.print(table)


@app.command()
def run(
    keys: Optional[List[str]] = typer.Argument(None, help="Demo keys to run."),
    run_all: bool = typer.Option(False, "--all", "-a", help="Run every demo."),
    category: Optional[PatternCategory] = typer.Option(
        None, "--category", "-c", help="With --all, only run one category."
    ),
    timings: bool = typer.Option(False, "--timings", help="Show how long each demo took."),
) -> None:
    """Run demos and print their output."""
    settings = _settings()
    if not keys and not run_all:
        raise _fail("Give one or more demo keys, or --all.")
    if keys and run_all:
        raise _fail("Give demo keys or --all, not both.")
    if category is not None and not run_all:
        raise _fail("--category only applies together with --all.")

    runner = DemoRunner()
    results: List[DemoResult] = []
    if run_all:
        results = runner.run_all(category)
    else:
        for key in keys:
            try:
                results.append(runner.run(key, raise_on_error=False))
            except PatternbookError as e:
                raise _fail(e.message)

    show_timings = timings or settings.show_timings
    show_headings = len(results) > 1
    for index, result in enumerate(results):
        if show_headings:
            if index:
                typer.echo("")
            typer.echo(f"== {result.title} ({result.key}) ==")
        for line in result.lines:
            typer.echo(line)
        if show_timings:
            typer.echo(f"({result.duration_ms:.1f} ms)")

    failed = [r for r in results if not r.succeeded]
    if failed:
        for result in failed:
            err_console.print(f"[bold red]Error:[/] {result.key}: {escape(result.error or '')}", highlight=False)
        raise typer.Exit(code=1)


@app.command()
def explain(
    key: str = typer.Argument(..., help="Demo key, e.g. 'builder'."),
    source: bool = typer.Option(False, "--source", "-s", help="Append the example source."),
) -> None:
    """Explain a pattern: intent, benefits, UML sketch and interview summary."""
    settings = _settings()
    catalog = _load_catalog(settings)
    try:
        entry = catalog.require(key)
        spec = load_builtin_demos().require(key) if source else None
    except PatternbookError as e:
        raise _fail(e.message)

    text = render_markdown(entry, _demo_source(spec) if spec is not None else None)
    console.print(Markdown(text), width=min(settings.output_width, console.width))


@app.command()
def docs(
    output_dir: Path = typer.Argument(..., help="Directory to write markdown files into."),
    include_source: bool = typer.Option(
        True, "--source/--no-source", help="Embed each example's source code."
    ),
) -> None:
    """Write one markdown document per pattern plus a README index."""
    settings = _settings()
    catalog = _load_catalog(settings)
    registry = load_builtin_demos()

    output_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    for key in catalog.keys():
        entry = catalog.require(key)
        spec = registry.get(key)
        source = _demo_source(spec) if include_source and spec is not None else None
        (output_dir / f"{key}.md").write_text(render_markdown(entry, source), encoding="utf-8")
        written += 1
    (output_dir / "README.md").write_text(render_index(catalog), encoding="utf-8")

    logger.info(f"Wrote {written} pattern documents to {output_dir}")
    typer.echo(f"Wrote {written} documents to {output_dir}")


@app.command()
def version() -> None:
    """Show the installed version."""
    typer.echo(f"patternbook {__version__}")


__all__ = ["app", "_configure_logging"]
