import json
import logging
from pathlib import Path

import click

from . import __version__
from .cli_utils import reconstruct_command_line
from .pipeline import (
    BACKENDS,
    AtomicWriter,
    CompileError,
    CompileOptions,
    OutputMode,
    OutputWriteError,
    SchemaCompiler,
    SchemaReadError,
)
from .pipeline.backends import BACKEND_ALIASES
from .pipeline.schema_ast import load_schema


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root type name when the schema has no title (defaults to the file name)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--language",
    "-l",
    default="rust",
    type=click.Choice(sorted([*BACKENDS, *BACKEND_ALIASES]), case_sensitive=False),
)
@click.option("--public", "-p", is_flag=True, default=False, help="Emit public/exported declarations where the language supports it")
@click.option("--force", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--no-generation-comment", is_flag=True, default=False, help="Do not put the generation command in the output")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def schema_to_types(name, config, language, public, force, no_generation_comment, verbose, path, output):
    """Generate type declarations for LANGUAGE from the schema at PATH into OUTPUT."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    options = CompileOptions()
    if config is not None:
        try:
            with open(config) as f:
                options = CompileOptions.from_dict(json.load(f))
        except (json.JSONDecodeError, ValueError) as e:
            raise click.ClickException(f"Invalid config file {Path(config).name}: {e}") from e

    # CLI flags override the config file
    if public:
        options.public_visibility = True
    if force:
        options.output.mode = OutputMode.FORCE
    if no_generation_comment:
        options.generation_comment = ""
    elif not options.generation_comment:
        options.generation_comment = f"Generated by schema_to_types v{__version__} : {reconstruct_command_line(schema_to_types)}"

    if name is None:
        name = Path(path).stem

    try:
        schema = load_schema(path, root_name=name)
        compiler = SchemaCompiler(schema, language, options, name)
        out = compiler.generate()
        AtomicWriter(options.output).write(Path(output), out, compiler.backend.BACKEND_ID)
    except (SchemaReadError, CompileError, OutputWriteError) as e:
        raise click.ClickException(str(e)) from e
