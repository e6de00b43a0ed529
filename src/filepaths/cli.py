"""Command-line interface for filepaths."""
import logging
import sys
from dataclasses import dataclass
from typing import Callable

import click

from . import argumented
from .config import Config
from .core import operations
from .core.errors import PathError
from .core.models import VARIANTS, Path, PathVariant
from .utils.console import THEMES, ConsoleManager


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(name)s: %(message)s' if debug else '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


@dataclass
class CliState:
    """Objects shared by every subcommand."""
    config: Config
    console: ConsoleManager
    variant: PathVariant


def _run(state: CliState, action: Callable[[], None]) -> None:
    """Run a subcommand body, reporting path errors as a failed status."""
    try:
        action()
    except PathError as e:
        state.console.print_error(str(e))
        if state.config.debug:
            state.console.print_exception()
        sys.exit(1)


@click.group()
@click.option('--variant', '-V', type=click.Choice(list(VARIANTS)), default=None,
              help='Path syntax to apply (default: FILEPATHS_VARIANT or native)')
@click.option('--theme', '-t', type=click.Choice(list(THEMES)), default=None,
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='filepaths')
@click.pass_context
def main(ctx: click.Context, variant: str, theme: str, debug: bool) -> None:
    """
    Manipulate file paths as text, without touching the file system.

    Examples:

        filepaths normalize a/./b/../c

        filepaths --variant windows relative 'C:\\a\\b' 'C:\\a\\x'

        filepaths join /a/b ../c d
    """
    config = Config()
    if variant:
        config.variant = variant
    if theme:
        config.theme = theme
    if debug:
        config.debug = True

    setup_logging(config.debug)

    try:
        path_variant = config.path_variant()
    except PathError as e:
        raise click.UsageError(str(e))

    ctx.obj = CliState(
        config=config,
        console=ConsoleManager(theme=config.theme),
        variant=path_variant,
    )


@main.command()
@click.argument('path')
@click.pass_obj
def normalize(state: CliState, path: str) -> None:
    """Eliminate '.' and resolvable '..' portions of PATH."""
    _run(state, lambda: state.console.print_path(argumented.normalize(path, state.variant)))


@main.command()
@click.argument('base')
@click.argument('others', nargs=-1, required=True)
@click.pass_obj
def join(state: CliState, base: str, others: tuple) -> None:
    """Append OTHERS to BASE without normalizing."""
    def action():
        result: Path = operations.join(base, others[0], state.variant)
        for other in others[1:]:
            result = operations.join(result, other, state.variant)
        state.console.print_path(argumented.to_string(result, state.variant))
    _run(state, action)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
def resolve(state: CliState, paths: tuple) -> None:
    """Join PATHS left to right and normalize the result."""
    _run(state, lambda: state.console.print_path(argumented.resolve_n(paths, state.variant)))


@main.command()
@click.argument('target')
@click.argument('base')
@click.pass_obj
def relative(state: CliState, target: str, base: str) -> None:
    """Print the relative path leading from BASE to TARGET."""
    _run(state, lambda: state.console.print_path(argumented.relative_to(target, base, state.variant)))


@main.command('is-absolute')
@click.argument('path')
@click.pass_obj
def is_absolute(state: CliState, path: str) -> None:
    """Tell whether PATH is absolute."""
    if argumented.is_absolute(path, state.variant):
        state.console.print_success(f"{path} is absolute")
    else:
        state.console.print_info(f"{path} is relative")


@main.command()
@click.argument('path')
@click.pass_obj
def parts(state: CliState, path: str) -> None:
    """Show the components PATH parses into."""
    state.console.print_components(
        argumented.parts(path, state.variant),
        title=f"{state.variant.name.upper()} COMPONENTS",
    )


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.pass_obj
def common(state: CliState, paths: tuple) -> None:
    """Print the longest leading path shared by all PATHS."""
    _run(state, lambda: state.console.print_path(argumented.common_prefix(paths, state.variant)))


if __name__ == '__main__':
    main()
