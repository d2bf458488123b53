import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import CodeGenerationError, CodeGeneratorConfig, OutputMode, PipelineGenerator


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--root", "-r", default=None, type=str, help="Name of the outermost generated module (default: AWS)")
@click.option(
    "--force/--no-force",
    default=None,
    help="Overwrite an existing output file (default: from config, overwrite)",
)
@click.option("--format", "format_code", is_flag=True, default=False, help="Run rustfmt on the generated code if available")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
def cfn_spec_to_code(config, root, force, format_code, verbose, path, output):
    """Generate Rust types from the resource specification at PATH into OUTPUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        try:
            with open(config, encoding="utf-8") as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError, ValueError, TypeError) as e:
            raise click.ClickException(f"Invalid config file {config}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if root is not None:
        config.root_module = root
    if force is not None:
        config.output.mode = OutputMode.FORCE if force else OutputMode.ERROR_IF_EXISTS
    if format_code:
        config.formatter.enabled = True

    command_line = reconstruct_command_line(cfn_spec_to_code)

    try:
        codegen = PipelineGenerator.from_file(path, config, command_line)
        codegen.write(output)
    except CodeGenerationError as e:
        raise click.ClickException(str(e)) from e
