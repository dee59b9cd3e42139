"""Main CLI entry point."""

import click
from ledgerview.logging_setup import configure_logging

# Import and register all commands at module level
from ledgerview.cli.commands import (
    normalize,
    format_cmd,
    import_cmd,
)


@click.group()
@click.option(
    "--currency",
    default="USD",
    show_default=True,
    help="Currency code used when formatting amounts "
    "(overrides LEDGERVIEW_CURRENCY environment variable)",
    envvar="LEDGERVIEW_CURRENCY",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. INFO or DEBUG "
    "(overrides LEDGERVIEW_LOG_LEVEL environment variable)",
    envvar="LEDGERVIEW_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, currency: str, log_level: str | None):
    """Ledgerview - display rules for a double-entry personal ledger.

    Normalize raw ledger amounts and balances into the signs people expect,
    format them as currency, and preview CSV imports before they are stored.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj["currency"] = currency.upper()


# Register all commands
normalize.register_commands(cli)
format_cmd.register_commands(cli)
import_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
