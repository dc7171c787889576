"""banglit CLI - Main entry point."""

import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from banglit.config import load_settings
from banglit.models import ReverseRuleTable, RuleTable
from banglit.qc.rule_order import check_rule_order
from banglit.rules.reverse import build_reverse, get_reverse_table
from banglit.rules.table import get_rule_table, load_rule_table
from banglit.transliteration import transliterate
from banglit.utils.io import write_json, write_lines
from banglit.utils.log import log_with_context, setup_logging


def load_tables(settings: dict[str, Any]) -> tuple[RuleTable, ReverseRuleTable]:
    """Load the configured rule table and its reverse."""
    rules_file = settings["transliteration"].get("rules_file")
    if not rules_file:
        return get_rule_table(), get_reverse_table()

    table = load_rule_table(Path(rules_file))
    return table, build_reverse(table)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: bundled settings.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Phonetic Bengali transliteration CLI."""
    try:
        settings = load_settings(settings_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_level = "DEBUG" if verbose else settings["logging"]["level"]
    log_format = settings["logging"]["format"]
    log_file = settings["logging"].get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=Path(log_file) if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command()
@click.argument("text", required=False)
@click.option("--mode", "-m", help="avro/forward, orva/reverse, banglish, lishbang")
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read text from file instead of TEXT",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write result to file instead of stdout",
)
@click.pass_context
def convert(
    ctx: click.Context,
    text: str | None,
    mode: str | None,
    input_path: Path | None,
    output_path: Path | None,
) -> None:
    """Transliterate TEXT, a file, or stdin."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]
    mode = mode or settings["transliteration"]["default_mode"]

    if text is not None and input_path is not None:
        click.echo("Error: give either TEXT or --input, not both", err=True)
        sys.exit(1)

    try:
        table, reverse_table = load_tables(settings)

        if text is not None:
            lines = text.splitlines() or [""]
        elif input_path is not None:
            lines = input_path.read_text(encoding="utf-8").splitlines()
        else:
            lines = sys.stdin.read().splitlines()

        results = [
            transliterate(line, mode, table=table, reverse_table=reverse_table)
            for line in tqdm(lines, desc="Transliterating", unit="line", disable=input_path is None)
        ]
        log_with_context(logger, "debug", "Transliterated input", mode=mode, lines=len(results))

        if output_path is not None:
            count = write_lines(output_path, results)
            click.echo(f"Wrote {count} lines to {output_path}", err=True)
        else:
            for line in results:
                click.echo(line)

    except Exception as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.group()
def rules() -> None:
    """Rule table maintenance commands."""
    pass


@rules.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Report rules that can never match because of table order."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        table, _ = load_tables(settings)
        result = check_rule_order(table, logger)
    except Exception as e:
        logger.error(f"Rule check failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for dup in result.duplicates:
        click.echo(f"  duplicate: #{dup.index} '{dup.find}' (first at #{dup.shadowed_by_index})")
    for item in result.shadowed:
        click.echo(
            f"  shadowed:  #{item.index} '{item.find}' "
            f"by #{item.shadowed_by_index} '{item.shadowed_by}'"
        )

    if not result.valid:
        click.echo(f"FAILED: {len(result.shadowed) + len(result.duplicates)} unreachable rules")
        sys.exit(1)

    click.echo(f"OK: {result.total_rules} rules, order is consistent")


@rules.command("export-reverse")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def export_reverse(ctx: click.Context, output: Path) -> None:
    """Write the reverse rule table as JSON."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        _, reverse_table = load_tables(settings)
        write_json(output, [rule.to_dict() for rule in reverse_table])
        click.echo(f"Reverse table ({len(reverse_table)} rules) written to {output}")
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
