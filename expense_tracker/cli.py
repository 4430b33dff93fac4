# expense_tracker/cli.py
import click
from dotenv import load_dotenv

from expense_tracker.config import build_ledger, configure_logging, load_config
from expense_tracker.core.models import CATEGORIES, DEFAULT_CATEGORY
from expense_tracker.errors import ExpenseError, InvalidExpenseError, StorageError
from expense_tracker.views import build_page


@click.group()
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to config.yaml (default: $EXPENSE_LEDGER_CONFIG or ./config.yaml)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file with EXPENSE_LEDGER_* overrides'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level (overrides config)'
)
@click.pass_context
def main(ctx, config_path, env_file, log_level):
    """
    Record expenses, list them newest first and show the running total
    with a per-category breakdown.
    """
    if env_file:
        load_dotenv(env_file)

    cfg = load_config(config_path)
    if log_level:
        cfg['log_level'] = log_level.upper()
    configure_logging(cfg['log_level'])
    ctx.obj = {'config': cfg}


def _ledger(ctx):
    obj = ctx.obj
    if 'ledger' not in obj:
        try:
            obj['ledger'] = build_ledger(obj['config'])
        except (ExpenseError, ValueError) as e:
            raise click.ClickException(str(e))
    return obj['ledger']


@main.command()
@click.argument('description')
@click.argument('amount')
@click.option(
    '--category', '-c',
    default=DEFAULT_CATEGORY,
    show_default=True,
    type=click.Choice(CATEGORIES),
    help='Expense category'
)
@click.pass_context
def add(ctx, description, amount, category):
    """Add an expense dated today."""
    ledger = _ledger(ctx)
    symbol = ctx.obj['config']['currency_symbol']
    try:
        record = ledger.add_expense(description, amount, category, strict=True)
    except InvalidExpenseError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except StorageError as e:
        raise click.ClickException(str(e))
    row = build_page([record], symbol).expenses[0]
    click.echo(f"Added {row.id}: {row.description} ({row.category}) {row.amount}")


@main.command()
@click.argument('expense_id')
@click.pass_context
def delete(ctx, expense_id):
    """Delete the expense with EXPENSE_ID."""
    ledger = _ledger(ctx)
    try:
        deleted = ledger.delete_expense(expense_id)
    except StorageError as e:
        raise click.ClickException(str(e))
    if not deleted:
        click.echo(f"No expense with id {expense_id}", err=True)
        ctx.exit(1)
    click.echo(f"Deleted {expense_id}.")


@main.command(name='list')
@click.pass_context
def list_expenses(ctx):
    """List expenses, newest first."""
    ledger = _ledger(ctx)
    page = build_page(ledger.expenses, ctx.obj['config']['currency_symbol'])
    if page.is_empty:
        click.echo(page.empty_message)
        return
    for row in page.expenses:
        click.echo(f"{row.id}  {row.date}  {row.category:<13} {row.amount:>12}  {row.description}")


@main.command()
@click.pass_context
def summary(ctx):
    """Show the total and per-category subtotals."""
    ledger = _ledger(ctx)
    page = build_page(ledger.expenses, ctx.obj['config']['currency_symbol'])
    click.echo(f"Total Expenses: {page.total}")
    for row in page.categories:
        click.echo(f"  {row.category}: {row.amount}")


@main.command()
@click.option('--host', default='127.0.0.1', show_default=True, help='Host to bind')
@click.option('--port', default=8000, show_default=True, type=int, help='Port to bind')
@click.pass_context
def serve(ctx, host, port):
    """Serve the expense page in the browser."""
    import uvicorn
    from webapp.main import create_app

    app = create_app(ctx.obj['config'], ledger=_ledger(ctx))
    click.echo(f"Expense ledger running at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=str(ctx.obj['config']['log_level']).lower())
