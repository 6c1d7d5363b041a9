"""
appsetgen — CLI entrypoint.

Usage:
    python -m appsetgen.main --help
    python -m appsetgen.main generate
    python -m appsetgen.main --config appset.yml check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import yaml

from appsetgen import __version__
from appsetgen.core.config.settings import Settings
from appsetgen.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="appsetgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to the ApplicationSet manifest (default: auto-detect appset.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """appsetgen — expand ApplicationSet generators into parameter sets."""
    settings = Settings.from_env()

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["settings"] = settings

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = settings.log_level

    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_file_level=settings.log_file_level,
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, as_json: bool) -> None:
    """Print the parameter sets produced by every generator."""
    from appsetgen.core.config.loader import ConfigError, load_appset
    from appsetgen.core.use_cases.generate import run_generate

    try:
        appset = load_appset(ctx.obj.get("config_path"))
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"ok": False, "error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    result = run_generate(appset, settings=ctx.obj["settings"])

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)
        return

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not ctx.obj.get("quiet", False):
        click.secho(
            f"# {result.appset_name or 'ApplicationSet'}: "
            f"{result.param_count} parameter sets",
            fg="cyan",
            err=True,
        )

    docs = [
        {"generator": r.index, "kind": r.kind, "params": r.params}
        for r in result.results
    ]
    click.echo(yaml.safe_dump_all(docs, sort_keys=False), nl=False)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate the ApplicationSet manifest."""
    from appsetgen.core.use_cases.check import check_appset

    result = check_appset(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.appset is not None  # guaranteed when valid
        click.secho("✅ Manifest is valid", fg="green", bold=True)
        click.echo(f"   ApplicationSet: {result.appset.name}")
        click.echo(f"   Generators: {len(result.appset.spec.generators)}")
        click.echo(f"   Go template: {'yes' if result.appset.spec.go_template else 'no'}")
    else:
        click.secho("❌ Manifest errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
