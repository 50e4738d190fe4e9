# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command line interface for inspecting formula definition documents."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .bottle import Bottle
from .checksum import Checksum
from .config import load_settings
from .errors import FormulaSpecError
from .loader import FormulaDefinition, load_formula
from .logging import configure_logging, fail, get_console, info, ok, section, warn
from .software_spec import SoftwareSpec

app = typer.Typer(
    name="formula-spec",
    help="Inspect and validate formula definition documents.",
    no_args_is_help=True,
    add_completion=False,
)

PathArgument = Annotated[Path, typer.Argument(help="Formula definition (.json or .toml).")]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="TOML settings file or pyproject.toml with [tool.formula-spec]."),
]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")]
DebugOption = Annotated[bool, typer.Option("--debug", help="Emit debug logging to stderr.")]


@dataclass(slots=True, frozen=True)
class _Presentation:
    emoji: bool
    color: bool

    @property
    def console(self) -> Console:
        return get_console(color=self.color, emoji=self.emoji)


def _load_or_exit(path: Path, config: Path | None, presentation: _Presentation) -> FormulaDefinition:
    try:
        settings = load_settings(config)
        return load_formula(path, settings=settings)
    except FileNotFoundError as exc:
        fail(f"{exc.filename or path}: no such file", use_emoji=presentation.emoji, use_color=presentation.color)
        raise typer.Exit(code=2) from exc
    except FormulaSpecError as exc:
        fail(str(exc), use_emoji=presentation.emoji, use_color=presentation.color)
        raise typer.Exit(code=1) from exc


def _spec_label(formula: FormulaDefinition, spec: SoftwareSpec) -> str:
    return "head" if spec is formula.head else "stable"


def _options_table(spec: SoftwareSpec) -> Table:
    table = Table(title="Options", box=box.SIMPLE, expand=False)
    table.add_column("Flag", no_wrap=True)
    table.add_column("Description")
    for option in spec.build:
        table.add_row(option.flag, option.description)
    return table


def _dependencies_table(spec: SoftwareSpec) -> Table:
    table = Table(title="Dependencies", box=box.SIMPLE, expand=False)
    table.add_column("Name", no_wrap=True)
    table.add_column("Tags")
    for dependency in spec.deps:
        table.add_row(dependency.name, ", ".join(dependency.tags))
    return table


def _resources_table(spec: SoftwareSpec) -> Table:
    table = Table(title="Resources", box=box.SIMPLE, expand=False)
    table.add_column("Name", no_wrap=True)
    table.add_column("Version")
    table.add_column("URL")
    for resource in spec.resources.values():
        table.add_row(resource.name, str(resource.version or "-"), resource.url or "")
    return table


def _bottle_table(bottle: Bottle) -> Table:
    table = Table(title=f"Bottle ({bottle.root_url}, revision {bottle.revision})", box=box.SIMPLE, expand=False)
    table.add_column("Tag", no_wrap=True)
    table.add_column("Algorithm")
    table.add_column("Digest")
    for tag in bottle.tags:
        checksum = bottle.checksum_for(tag)
        if checksum is not None:
            table.add_row(tag, checksum.hash_type.value, checksum.hexdigest)
    return table


@app.command("show")
def show(
    path: PathArgument,
    config: ConfigOption = None,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
    debug: DebugOption = False,
) -> None:
    """Render the specs, options, dependencies and bottle of a formula."""

    presentation = _Presentation(emoji=not no_emoji, color=not no_color)
    configure_logging(debug=debug, use_color=presentation.color)
    formula = _load_or_exit(path, config, presentation)
    info(f"{formula.name}: loaded from {path}", use_emoji=presentation.emoji, use_color=presentation.color)
    console = presentation.console
    for spec in formula.specs:
        section(f"{formula.name} {_spec_label(formula, spec)} {spec.version or '?'}", use_color=presentation.color)
        console.print(f"url: {spec.url}")
        if spec.build:
            console.print(_options_table(spec))
        if spec.deps:
            console.print(_dependencies_table(spec))
        if spec.resources:
            console.print(_resources_table(spec))
    if formula.bottle is not None:
        section(f"{formula.name} bottle", use_color=presentation.color)
        console.print(_bottle_table(formula.bottle))


def _checksums(formula: FormulaDefinition) -> Iterator[tuple[str, Checksum]]:
    for spec in formula.specs:
        label = _spec_label(formula, spec)
        if spec.checksum is not None:
            yield label, spec.checksum
        for resource in spec.resources.values():
            if resource.checksum is not None:
                yield f"{label} resource {resource.name}", resource.checksum
    if formula.bottle is not None:
        for tag in formula.bottle.tags:
            checksum = formula.bottle.checksum_for(tag)
            if checksum is not None:
                yield f"bottle {tag}", checksum


def collect_warnings(formula: FormulaDefinition) -> list[str]:
    """Return non-fatal findings about ``formula``.

    Reports a stable spec without a checksum and any checksum whose digest
    does not match the length and alphabet of its algorithm.
    """

    warnings: list[str] = []
    if formula.stable is not None and formula.stable.checksum is None:
        warnings.append(f"{formula.name}: stable spec has no checksum")
    for label, checksum in _checksums(formula):
        if not checksum.is_well_formed:
            warnings.append(f"{formula.name}: {label} {checksum.hash_type.value} digest is malformed")
    return warnings


@app.command("check")
def check(
    path: PathArgument,
    config: ConfigOption = None,
    strict: Annotated[bool, typer.Option("--strict", help="Treat warnings as failures.")] = False,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
    debug: DebugOption = False,
) -> None:
    """Validate a formula definition and report problems."""

    presentation = _Presentation(emoji=not no_emoji, color=not no_color)
    configure_logging(debug=debug, use_color=presentation.color)
    formula = _load_or_exit(path, config, presentation)
    warnings = collect_warnings(formula)
    for message in warnings:
        warn(message, use_emoji=presentation.emoji, use_color=presentation.color)
    if strict and warnings:
        fail(f"{formula.name}: {len(warnings)} warning(s)", use_emoji=presentation.emoji, use_color=presentation.color)
        raise typer.Exit(code=1)
    option_count = sum(len(spec.build) for spec in formula.specs)
    dependency_count = sum(len(spec.deps) for spec in formula.specs)
    ok(
        f"{formula.name}: {len(formula.specs)} spec(s), {option_count} option(s), "
        f"{dependency_count} dependency declaration(s)",
        use_emoji=presentation.emoji,
        use_color=presentation.color,
    )


__all__ = ["app", "check", "collect_warnings", "show"]
