import json
import logging
from pathlib import Path

import click

from .errors import SchemaToGoError
from .handlers import create_default_registry
from .pipeline import CodeGeneratorConfig
from .pipeline.config import load_config_file

logger = logging.getLogger(__name__)


def _parse_acronyms(ctx, param, value):
    if value is None:
        return None
    try:
        acronyms = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}") from e
    if not isinstance(acronyms, dict):
        raise click.BadParameter('expected a JSON object, e.g. \'{"api":true,"jwt":true}\'')
    return {str(k): bool(v) for k, v in acronyms.items()}


def _list_generators(registry) -> None:
    click.echo("Available Generators:")
    click.echo()
    infos = registry.list_info()
    if not infos:
        click.echo("No generators registered.")
        return
    for info in infos:
        click.echo(f"  {info.name}")
        click.echo(f"    Description: {info.description}")
        click.echo(f"    Supported formats: {', '.join(info.supported_formats)}")
        click.echo()


@click.command()
@click.option("--generator", "-g", default=None, type=str, help="Generator to use, auto-detected from the file suffix if omitted")
@click.option("--package", "-p", "package_name", default=None, type=str, help="Target Go package name (default: types)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON configuration file")
@click.option("--acronyms", default=None, callback=_parse_acronyms, help='JSON object of acronym overrides, e.g. \'{"api":true,"jwt":true}\'')
@click.option("--no-comments", is_flag=True, default=False, help="Do not emit comments from schema descriptions")
@click.option("--no-format", is_flag=True, default=False, help="Do not run gofmt on the output file")
@click.option("--list", "list_generators", is_flag=True, default=False, help="List available generators and exit")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("schema_file", required=False, default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output_file", required=False, default=None, type=click.Path(dir_okay=False, resolve_path=True))
def json_schema_to_go(generator, package_name, config, acronyms, no_comments, no_format, list_generators, verbose, schema_file, output_file):
    """Generate Go type declarations from a JSON Schema, OpenAPI or JSON-RPC schema file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    registry = create_default_registry()

    if list_generators:
        _list_generators(registry)
        return

    if schema_file is None or output_file is None:
        raise click.UsageError("SCHEMA_FILE and OUTPUT_FILE are required")

    try:
        config = load_config_file(config) if config is not None else CodeGeneratorConfig()
    except SchemaToGoError as e:
        raise click.ClickException(str(e)) from e

    # Command line flags override the config file
    if package_name is not None:
        config.package_name = package_name
    if acronyms is not None:
        config.acronyms.update(acronyms)
    if no_comments:
        config.include_comments = False
    if no_format:
        config.format_output = False

    try:
        if generator is not None:
            handler = registry.get(generator)
        else:
            candidates = registry.get_by_format(schema_file)
            if not candidates:
                raise click.ClickException(f"No generators found that support file format of {schema_file}")
            if len(candidates) > 1:
                logger.warning(
                    "Multiple generators support this format: %s. Using '%s'. Use --generator to specify.",
                    ", ".join(candidate.name for candidate in candidates),
                    candidates[0].name,
                )
            handler = candidates[0]

        handler.validate_schema(Path(schema_file))
        handler.generate(Path(schema_file), Path(output_file), config)
    except SchemaToGoError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Successfully generated Go types using '{handler.name}' generator in {output_file}")
