## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# mopt — getopt style options, re-scanned from the argument vector on every query.
#

import sys
from dataclasses import dataclass

import click

from .usage import Usage, UsageConfig, HELP_LEAD
from .bitflags import bit_names, MASK32
from .formatting import write_without_ansi, format_value


@dataclass(frozen=True)
class QueryConfig:
    usage: str
    lead: str | None
    plain: bool


def _make_usage(ctx: click.Context, argv: tuple[str, ...]) -> Usage:
    config: QueryConfig = ctx.obj['config']
    lead = config.lead if config.lead is not None else UsageConfig().lead
    return Usage(config.usage, argv=list(argv), config=UsageConfig(lead=lead, exit=ctx.exit, file=sys.stdout))


def _check_flag(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if len(value) != 1:
        raise click.BadParameter(f"Expected a single option letter, got `{value}`.")
    return value


def _echo(value) -> None:
    click.echo(format_value(value))


# Defaults may start with a dash (e.g. `-1`), so unknown options pass through as arguments.
_QUERY_SETTINGS = {'ignore_unknown_options': True}

_flag_argument = click.argument('flag', callback=_check_flag)
_argv_argument = click.argument('argv', nargs=-1)


@click.group(context_settings={'help_option_names': ['--help']})
@click.option('--usage', '-u', 'usage_text', default='', help='Usage text printed when the scanned arguments contain -h.')
@click.option('--lead', default=None, help=f'Replace the lead phrase printed before the usage text (default: {HELP_LEAD.strip()!r}).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from diagnostics.')
@click.pass_context
def cli(ctx: click.Context, usage_text: str, lead: str | None, plain: bool) -> None:
    """Query getopt style options from ARGV, given after `--` with the program name first."""
    ctx.ensure_object(dict)
    ctx.obj['config'] = QueryConfig(usage=usage_text, lead=lead, plain=plain)

    if plain:
        sys.stderr.write = write_without_ansi(sys.stderr.write)


@cli.command('bool', context_settings=_QUERY_SETTINGS)
@_flag_argument
@_argv_argument
@click.pass_context
def query_bool(ctx: click.Context, flag: str, argv: tuple[str, ...]) -> None:
    """Print `true` and exit 0 if -FLAG was given, else print `false` and exit 1."""
    found = _make_usage(ctx, argv).opt_b(flag)
    _echo(found)
    ctx.exit(0 if found else 1)


@cli.command('str', context_settings=_QUERY_SETTINGS)
@_flag_argument
@click.argument('default')
@_argv_argument
@click.pass_context
def query_string(ctx: click.Context, flag: str, default: str, argv: tuple[str, ...]) -> None:
    _echo(_make_usage(ctx, argv).opt_s(flag, default))


@cli.command('num', context_settings=_QUERY_SETTINGS)
@_flag_argument
@click.argument('default', type=int)
@_argv_argument
@click.pass_context
def query_number(ctx: click.Context, flag: str, default: int, argv: tuple[str, ...]) -> None:
    _echo(_make_usage(ctx, argv).opt_n(flag, default))


@cli.command('float', context_settings=_QUERY_SETTINGS)
@_flag_argument
@click.argument('default', type=float)
@_argv_argument
@click.pass_context
def query_float(ctx: click.Context, flag: str, default: float, argv: tuple[str, ...]) -> None:
    _echo(_make_usage(ctx, argv).opt_f(flag, default))


@cli.command('csf', context_settings=_QUERY_SETTINGS)
@_flag_argument
@click.argument('current', type=click.IntRange(0, MASK32))
@click.argument('table')
@_argv_argument
@click.option('--names', '-n', is_flag=True, help='Print the names of the set bits instead of the mask.')
@click.pass_context
def query_bitflags(ctx: click.Context, flag: str, current: int, table: str, argv: tuple[str, ...], names: bool) -> None:
    """Apply `-FLAGname,no-name` to the CURRENT mask, bits ordered as in TABLE."""
    mask = _make_usage(ctx, argv).opt_csf(flag, current, table)
    _echo(bit_names(mask, table) if names else mask)


@cli.command('list', context_settings=_QUERY_SETTINGS)
@_argv_argument
@click.pass_context
def query_list(ctx: click.Context, argv: tuple[str, ...]) -> None:
    """Print the arguments after the last option, or after `--`, one per line."""
    tail = _make_usage(ctx, argv).opt_l()
    if tail: _echo(tail)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='mopt')


if __name__ == "__main__":
    main()
