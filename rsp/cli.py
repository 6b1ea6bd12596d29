"""Command-line interface for managing SSH port forwards."""

from __future__ import annotations

import sys
from typing import Sequence

import click

from rsp.add import add_rule
from rsp.check import check_rules
from rsp.edit import edit_rule
from rsp.listing import list_rules
from rsp.remove import remove_rules
from rsp.start import start_forward
from rsp.stop import stop_forward

_VERSION = "0.1.1"
_NAMES_HELP = "Rule names to operate on. Use 'all' to operate on all rules"


class _AliasedGroup(click.Group):
    aliases = {"rm": "remove", "ls": "list"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))


def build_cli() -> click.Group:
    """Build the command group."""

    @click.group(cls=_AliasedGroup, help="A SSH-based portforward tool")
    @click.version_option(version=_VERSION, prog_name="rsp")
    @click.option(
        "--rules-file",
        type=click.Path(dir_okay=False),
        envvar="RSP_RULES_FILE",
        default=None,
        help="Rules file to use instead of ~/.rsp.json.",
    )
    @click.pass_context
    def cli(ctx: click.Context, rules_file: str | None) -> None:
        ctx.obj = rules_file

    @cli.command("add", help="Add a new rule")
    @click.pass_obj
    def add(rules_path: str | None) -> None:
        add_rule(rules_path)

    @cli.command("remove", help="Remove a rule or rules (alias: rm)")
    @click.argument("names", nargs=-1)
    @click.pass_obj
    def remove(rules_path: str | None, names: tuple[str, ...]) -> None:
        remove_rules(list(names), rules_path)

    @cli.command("edit", help="Edit a rule")
    @click.argument("name", required=False, default="")
    @click.pass_obj
    def edit(rules_path: str | None, name: str | None) -> None:
        edit_rule(name or "", rules_path)

    @cli.command("list", help="List all rules (alias: ls)")
    @click.pass_obj
    def list_command(rules_path: str | None) -> None:
        list_rules(rules_path)

    @cli.command("start", help=f"Start one or all portforward. {_NAMES_HELP}")
    @click.argument("names", nargs=-1)
    @click.pass_obj
    def start(rules_path: str | None, names: tuple[str, ...]) -> None:
        start_forward(list(names), rules_path)

    @cli.command("stop", help=f"Stop one or all portforward. {_NAMES_HELP}")
    @click.argument("names", nargs=-1)
    @click.pass_obj
    def stop(rules_path: str | None, names: tuple[str, ...]) -> None:
        stop_forward(list(names), rules_path)

    @cli.command("check", help=f"Check rules status. {_NAMES_HELP}")
    @click.argument("names", nargs=-1)
    @click.pass_obj
    def check(rules_path: str | None, names: tuple[str, ...]) -> None:
        check_rules(list(names), rules_path)

    return cli


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; errors from commands are reported, not raised."""
    cli = build_cli()
    try:
        result = cli.main(
            args=list(argv) if argv is not None else None,
            prog_name="rsp",
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except Exception as exc:  # noqa: BLE001 - every command error is reported
        print(exc, file=sys.stderr)
    else:
        if isinstance(result, int):
            return result
    return 0


if __name__ == "__main__":
    sys.exit(main())