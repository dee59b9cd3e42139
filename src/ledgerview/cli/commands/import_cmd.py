"""CSV import preview command."""

import click
from ledgerview.cli.error_handling import handle_domain_error
from ledgerview.domain.account_types import AccountSubtype
from ledgerview.domain.csv_import import CSVImportService
from ledgerview.domain.currency import format_currency_amount
from ledgerview.domain.errors import DomainError
from ledgerview.domain.import_mapping import (
    filter_out_duplicate_rows,
    should_show_default_account_warning,
)


def _parse_field_map(ctx, mappings: tuple[str, ...]) -> dict[str, str]:
    field_map = {}
    for mapping in mappings:
        field, sep, column = mapping.partition("=")
        if not sep or not field.strip() or not column.strip():
            handle_domain_error(ctx, ValueError(f"--map expects FIELD=COLUMN, got '{mapping}'"))
        field_map[field.strip().lower()] = column.strip()
    return field_map


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True))
@click.option(
    "--map",
    "mappings",
    multiple=True,
    required=True,
    help="Map an import field to a CSV column as FIELD=COLUMN "
    "(fields: date, amount, credit, debit, description, category)",
)
@click.option("--account", default="Imported Account", show_default=True, help="Account being imported into")
@click.option(
    "--subtype",
    type=click.Choice([s.value for s in AccountSubtype], case_sensitive=False),
    default="asset",
    show_default=True,
    help="Subtype of the account being imported into",
)
@click.option("--dayfirst", is_flag=True, help="Read ambiguous dates as day/month/year")
@click.option("--drop-duplicates", is_flag=True, help="Leave rows repeated within the file out of the preview")
@click.pass_context
def import_csv(
    ctx,
    csv_file: str,
    mappings: tuple[str, ...],
    account: str,
    subtype: str,
    dayfirst: bool,
    drop_duplicates: bool,
):
    """Preview the journal lines a CSV file would produce.

    Nothing is stored. Each row shows the raw amount that would be saved and
    the amount as it will be displayed for the account.

    Examples:
        ledgerview import bank.csv --map date=Date --map amount=Amount
        ledgerview import card.csv --subtype liability --map date=Posted \\
            --map credit=Credit --map debit=Debit --map description=Memo
    """
    field_map = _parse_field_map(ctx, mappings)
    currency = ctx.obj["currency"]

    try:
        service = CSVImportService(
            field_map, account_name=account, account_subtype=subtype, dayfirst=dayfirst
        )
        result = service.preview_csv(csv_file)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    rows = result["rows"]
    if drop_duplicates:
        rows = filter_out_duplicate_rows(rows, result["duplicates"])

    if rows:
        click.echo(f"\nPreview of {len(rows)} row(s):")
        click.echo(f"{'Row':>4s}  {'Date':10s}  {'Raw':>14s}  {'Display':>14s}  {'Counter account':24s}  Description")
        click.echo("-" * 100)
        for row in rows:
            counter = row["to_account"] if row["from_account"] == account else row["from_account"]
            marker = "  (duplicate)" if row["is_duplicate"] else ""
            click.echo(
                f"{row['row_number']:>4d}  {row['date']:10s}  "
                f"{format_currency_amount(row['amount'], currency):>14s}  "
                f"{format_currency_amount(row['display_amount'], currency):>14s}  "
                f"{counter[:24]:24s}  {row['description'] or ''}{marker}"
            )
    else:
        click.echo("No rows to import.")

    click.echo("\nPreview complete:")
    click.echo(f"  Rows: {len(rows)}")
    click.echo(f"  Duplicates: {len(result['duplicates'])}")
    if should_show_default_account_warning(result["defaulted"]):
        click.echo(f"  Uncategorized: {len(result['defaulted'])} row(s) use a default category")
    if result["errors"]:
        click.echo(f"  Errors: {len(result['errors'])}")
        for error in result["errors"]:
            click.echo(f"    {error}", err=True)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
