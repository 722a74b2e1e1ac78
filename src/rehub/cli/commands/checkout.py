"""Check out the head of a pull request as a local branch."""

import logging

import click

from rehub.cli.ensure_ideal import EnsureIdeal
from rehub.core.checkout_rewriter import CheckoutRewritten, rewrite_checkout
from rehub.core.context import RehubContext
from rehub.core.invocation import Invocation
from rehub.core.runner import run_invocation
from rehub.gateway.git.abc import GitCommandError
from rehub.output.output import user_output

logger = logging.getLogger(__name__)

RAW_ARGS_KEY = "rehub.raw_args"


class GitPassthroughCommand(click.Command):
    """Command whose arguments are forwarded to git verbatim.

    click drops a literal ``--`` while parsing, but ``git checkout`` needs it to
    separate revisions from paths, so the unparsed arguments are kept aside.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    "checkout",
    cls=GitPassthroughCommand,
    context_settings={"ignore_unknown_options": True, "help_option_names": ["--help"]},
)
@click.argument(
    "git_args",
    nargs=-1,
    type=click.UNPROCESSED,
    metavar="<PULLREQ-URL> [<BRANCH>] [GIT-CHECKOUT-ARGS]...",
)
@click.pass_context
def checkout_cmd(click_ctx: click.Context, git_args: tuple[str, ...]) -> None:
    """Check out the head of a pull request as a local branch.

    Anything that is not a pull request URL is handed to `git checkout`
    unchanged.

    Examples:

        $ rehub checkout https://github.com/jingweno/gh/pull/73
        > git remote add -f --no-tags -t feature jingweno https://github.com/jingweno/gh.git
        > git checkout --track -B jingweno-feature jingweno/feature
    """
    ctx: RehubContext = click_ctx.obj
    params = click_ctx.meta.get(RAW_ARGS_KEY, list(git_args))
    invocation = Invocation(command="checkout", params=list(params))

    if not invocation.is_params_empty():
        try:
            result = rewrite_checkout(ctx, invocation)
        except GitCommandError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

        result = EnsureIdeal.ideal_state(result)
        if isinstance(result, CheckoutRewritten):
            invocation = result.invocation

    status = run_invocation(ctx.executor, invocation)
    if status != 0:
        raise SystemExit(status)
