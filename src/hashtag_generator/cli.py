"""Command-line entry point for Hashtag Generator."""

from __future__ import annotations

import json
import logging
import sys

import click

from .commands import generate as generate_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.model_manager import ensure_local_model, has_model_files
from .core.text_utils import format_hashtags, is_blank

# Setup logging early so submodules inherit sane defaults
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@click.group()
@click.option(
    "--config",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Path to config file (defaults to data_dir/config/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """Hashtag Generator - propose hashtags for a caption or post."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command("generate")
@click.argument("text", required=False)
@click.option(
    "--file",
    "file_",
    type=click.File("r", encoding="utf-8"),
    help="Read the text from a file ('-' for stdin)",
)
@click.option("--limit", type=int, help="Maximum number of hashtags (default: output.limit)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["plain", "json", "table"]),
    default="plain",
    show_default=True,
    help="plain: one line ready to paste; json: tags with confidences; table: one tag per line",
)
@click.option(
    "--probe/--no-probe",
    default=None,
    help="Run the embedding probe (default: embedding.enabled from config)",
)
@click.pass_context
def generate(
    ctx: click.Context,
    text: str | None,
    file_,
    limit: int | None,
    output_format: str,
    probe: bool | None,
) -> None:
    """Generate hashtags from TEXT, --file, or standard input."""
    if text is not None and file_ is not None:
        raise click.UsageError("Pass either TEXT or --file, not both")
    if text is None:
        stream = file_ if file_ is not None else (None if sys.stdin.isatty() else sys.stdin)
        text = stream.read() if stream is not None else ""

    if is_blank(text):
        click.echo("❌ Enter some text: please enter text to generate hashtags from", err=True)
        sys.exit(1)

    try:
        hashtags = generate_cmd.run(ctx.obj["config_path"], text, limit=limit, probe=probe)
    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Generate command failed: {exc}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps([h.to_dict() for h in hashtags], indent=2))
    elif output_format == "table":
        for h in hashtags:
            click.echo(f"{h.tag:<24} {h.confidence:.2f}")
    else:
        click.echo(format_hashtags(hashtags))


@cli.command("vendor-model")
@click.option("--model", default=None, help="Model to vendor (default: embedding.model from config)")
@click.pass_context
def vendor_model(ctx: click.Context, model: str | None) -> None:
    """Download the embedding probe's model into the data directory."""
    try:
        spec = model or ConfigManager(ctx.obj["config_path"]).get_pipeline_settings()["embedding"]["model"]
        local_path = ensure_local_model(spec)
        if local_path == spec and not has_model_files(spec):
            click.echo(f"❌ Could not vendor model '{spec}'", err=True)
            sys.exit(1)
        click.echo(f"✅ Model available at: {local_path}")
    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Vendor-model command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("status")
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and effective pipeline settings."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        click.echo(f"📄 Config file: {config_manager.config_path}")

        if config_manager.validate_config():
            click.echo("✅ Configuration is valid")
        else:
            click.echo("❌ Configuration validation failed")
            return

        settings = config_manager.get_pipeline_settings()
        for section, values in settings.items():
            rendered = ", ".join(f"{k}={v}" for k, v in values.items())
            click.echo(f"   {section}: {rendered}")

    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Error checking status: {exc}", err=True)


if __name__ == "__main__":  # pragma: no cover - script entry
    cli()
