"""Normalization commands."""

import click
from ledgerview.cli.error_handling import handle_domain_error, parse_amount_or_exit
from ledgerview.domain.account_types import AccountSubtype, AccountType
from ledgerview.domain.currency import format_currency_amount, format_multi_currency_balances
from ledgerview.domain.errors import DomainError
from ledgerview.domain.indicators import get_transaction_visual_indicator
from ledgerview.domain.normalization import (
    compute_net_worth_by_currency,
    normalize_account_balance,
    normalize_transaction_amount,
)

_TYPE_CHOICE = click.Choice([t.value for t in AccountType], case_sensitive=False)
_SUBTYPE_CHOICE = click.Choice([s.value for s in AccountSubtype], case_sensitive=False)


@click.group()
def normalize_group():
    """Normalize raw ledger values for display.

    Negative raw values must follow "--", e.g.:
        ledgerview normalize amount --type user --subtype asset -- -42.10
    """
    pass


@normalize_group.command("amount")
@click.argument("amount")
@click.option("--type", "account_type", type=_TYPE_CHOICE, default="user", show_default=True, help="Account type")
@click.option("--subtype", "account_subtype", type=_SUBTYPE_CHOICE, default="asset", show_default=True, help="Account subtype")
@click.option(
    "--other-account",
    is_flag=True,
    help="Render the leg as seen from the other account of a transfer",
)
@click.pass_context
def normalize_amount(ctx, amount: str, account_type: str, account_subtype: str, other_account: bool):
    """Normalize a raw transaction amount."""
    raw = parse_amount_or_exit(ctx, amount)
    currency = ctx.obj["currency"]

    try:
        display = normalize_transaction_amount(raw, account_type, account_subtype, not other_account)
        indicator = get_transaction_visual_indicator(raw, account_type, account_subtype, not other_account)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Raw amount:      {raw}")
    click.echo(f"Display amount:  {display}")
    click.echo(f"Formatted:       {format_currency_amount(display, currency)}")
    click.echo(f"Indicator:       {indicator.css_class} ({indicator.color_class}, {indicator.aria_label})")


@normalize_group.command("balance")
@click.argument("balance")
@click.option("--type", "account_type", type=_TYPE_CHOICE, default="user", show_default=True, help="Account type")
@click.option("--subtype", "account_subtype", type=_SUBTYPE_CHOICE, default="asset", show_default=True, help="Account subtype")
@click.pass_context
def normalize_balance(ctx, balance: str, account_type: str, account_subtype: str):
    """Normalize a raw account balance."""
    raw = parse_amount_or_exit(ctx, balance)
    currency = ctx.obj["currency"]

    try:
        display = normalize_account_balance(raw, account_type, account_subtype)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Raw balance:     {raw}")
    click.echo(f"Display balance: {display}")
    click.echo(f"Formatted:       {format_currency_amount(display, currency)}")


def _parse_balances(ctx, values: tuple[str, ...], option: str) -> dict:
    """Parse repeated CUR=AMOUNT options into a dict, summing repeats."""
    balances = {}
    for value in values:
        currency, sep, amount = value.partition("=")
        if not sep or not currency.strip():
            handle_domain_error(ctx, ValueError(f"{option} expects CURRENCY=AMOUNT, got '{value}'"))
        code = currency.strip().upper()
        balances[code] = balances.get(code, 0) + parse_amount_or_exit(ctx, amount)
    return balances


@click.command("net-worth")
@click.option("--asset", "assets", multiple=True, help="Raw asset balance as CURRENCY=AMOUNT (repeatable)")
@click.option("--liability", "liabilities", multiple=True, help="Raw liability balance as CURRENCY=AMOUNT (repeatable)")
@click.pass_context
def net_worth(ctx, assets: tuple[str, ...], liabilities: tuple[str, ...]):
    """Compute net worth per currency from raw balances.

    Liability balances are given as stored, i.e. negative when money is owed.

    Examples:
        ledgerview net-worth --asset USD=1500 --liability USD=-250
        ledgerview net-worth --asset USD=100 --asset EUR=50 --liability EUR=-20
    """
    asset_balances = _parse_balances(ctx, assets, "--asset")
    liability_balances = _parse_balances(ctx, liabilities, "--liability")

    result = compute_net_worth_by_currency(asset_balances, liability_balances)
    click.echo(f"Net worth: {format_multi_currency_balances(result)}")


def register_commands(cli):
    """Register normalization commands with main CLI."""
    cli.add_command(normalize_group, name="normalize")
    cli.add_command(net_worth)
