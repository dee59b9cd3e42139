"""Currency formatting commands."""

import click
from ledgerview.cli.error_handling import handle_domain_error, parse_amount_or_exit
from ledgerview.domain.currency import (
    FORMAT_PRESETS,
    SUPPORTED_CURRENCY_OPTIONS,
    format_currency_amount,
)
from ledgerview.domain.errors import DomainError


@click.command("format")
@click.argument("amount")
@click.option("--currency", help="Currency code (defaults to the global --currency)")
@click.option(
    "--preset",
    type=click.Choice(FORMAT_PRESETS),
    default="summary",
    show_default=True,
    help="summary: $1,234.56 | code: 1,234.56 USD | detail: USD 1,234.56",
)
@click.option("--decimals", type=click.IntRange(0, 8), default=2, show_default=True, help="Decimal places")
@click.option("--no-grouping", is_flag=True, help="Omit thousands separators")
@click.pass_context
def format_amount(ctx, amount: str, currency: str | None, preset: str, decimals: int, no_grouping: bool):
    """Format an amount as currency.

    Examples:
        ledgerview format 1234.5
        ledgerview format --currency EUR --preset code -- -99.999
    """
    value = parse_amount_or_exit(ctx, amount)
    code = (currency or ctx.obj["currency"]).upper()

    try:
        click.echo(
            format_currency_amount(
                value, code, preset=preset, decimals=decimals, use_grouping=not no_grouping
            )
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("currencies")
def list_currencies():
    """List supported account currencies."""
    click.echo("\nCurrencies:")
    click.echo("-" * 40)
    for option in SUPPORTED_CURRENCY_OPTIONS:
        click.echo(f"{option.code} | {option.symbol:5s} | {option.label}")


def register_commands(cli):
    """Register formatting commands with main CLI."""
    cli.add_command(format_amount)
    cli.add_command(list_currencies)
