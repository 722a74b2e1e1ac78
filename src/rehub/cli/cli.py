import logging

import click

from rehub.cli.commands.checkout import checkout_cmd
from rehub.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def build_global_flags(
    chdirs: tuple[str, ...],
    config_overrides: tuple[str, ...],
    git_dir: str | None,
    work_tree: str | None,
) -> list[str]:
    """git global flags in the order git should see them.

    ``-C`` flags keep their relative order, which is what matters for
    resolving relative paths.
    """
    flags: list[str] = []
    for path in chdirs:
        flags.extend(["-C", path])
    for override in config_overrides:
        flags.extend(["-c", override])
    if git_dir is not None:
        flags.append(f"--git-dir={git_dir}")
    if work_tree is not None:
        flags.append(f"--work-tree={work_tree}")
    return flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="rehub")
@click.option(
    "-C", "chdirs", multiple=True, metavar="<path>", help="Run git as if started in <path>"
)
@click.option(
    "-c",
    "config_overrides",
    multiple=True,
    metavar="<name>=<value>",
    help="Pass a config override to git",
)
@click.option("--git-dir", default=None, metavar="<path>", help="Set the path to the repository")
@click.option(
    "--work-tree", default=None, metavar="<path>", help="Set the path to the working tree"
)
@click.option("--noop", is_flag=True, help="Print the git commands instead of running them")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    chdirs: tuple[str, ...],
    config_overrides: tuple[str, ...],
    git_dir: str | None,
    work_tree: str | None,
    noop: bool,
    debug: bool,
) -> None:
    """Check out GitHub pull requests with plain git."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        global_flags = build_global_flags(chdirs, config_overrides, git_dir, work_tree)
        try:
            ctx.obj = create_context(global_flags=global_flags, noop=noop)
        except ValueError as e:
            raise click.ClickException(str(e)) from e


cli.add_command(checkout_cmd)
