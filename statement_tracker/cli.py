# statement_tracker/cli.py
import logging
import click
from statement_tracker.config import load_config
from statement_tracker.core.aggregator import compute, statements
from statement_tracker.core.models import ValidationError
from statement_tracker.core.store import TransactionStore
from statement_tracker.manual import load_manual_transactions
from statement_tracker.outputs import get_output
from statement_tracker.outputs.base import EmptyExportError
from statement_tracker.utils import format_peso


def _configure_logging(level):
    logging.basicConfig(
        level=str(level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
def main():
    """Build income, balance and cash flow statements from transactions."""


@main.command()
@click.option(
    '--file', 'manual_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file of transactions (overrides config if provided)'
)
@click.option(
    '--output', 'output_format',
    default='excel',
    type=click.Choice(['excel', 'csv', 'html']),
    help='Output target: excel, csv, or html'
)
@click.option(
    '--config', 'config_path',
    default='config.yaml',
    type=click.Path(dir_okay=False),
    help='Path to config.yaml (defaults are used when it does not exist)'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    help='Logging level (defaults to log_level from config)'
)
def report(manual_file, output_format, config_path, log_level):
    """
    Load transactions from a YAML file, print the three financial
    statements, and write them to the chosen output.
    """
    cfg = load_config(config_path)
    _configure_logging(log_level or cfg['log_level'])

    path = manual_file or cfg.get('manual_transactions_file')
    if not path:
        raise click.UsageError("No transactions file given; use --file.")

    store = TransactionStore()
    try:
        store.extend(load_manual_transactions(path))
    except FileNotFoundError:
        raise click.ClickException(f"Transactions file not found: {path}")
    except ValidationError as e:
        raise click.ClickException(f"Invalid transactions file: {e}")

    txs = store.all()
    totals = compute(txs)
    for statement in statements(totals):
        click.echo(statement.title)
        for label, amount in statement.rows:
            click.echo(f"  {label:<15}{format_peso(amount):>16}")

    outputter = get_output(output_format, cfg)
    try:
        out_path = outputter.write(txs, totals)
    except EmptyExportError as e:
        raise click.ClickException(str(e))

    click.echo(f"Wrote {len(txs)} transaction(s) to {out_path}.")


@main.command()
@click.option('--host', default=None, help='Host to bind (default from config: 127.0.0.1)')
@click.option('--port', default=None, type=int, help='Port to bind (default from config: 8000)')
@click.option(
    '--config', 'config_path',
    default='config.yaml',
    type=click.Path(dir_okay=False),
    help='Path to config.yaml'
)
def serve(host, port, config_path):
    """Run the bookkeeping web form."""
    import uvicorn
    from statement_tracker.web import create_app

    cfg = load_config(config_path)
    _configure_logging(cfg['log_level'])
    host = host or cfg['web']['host']
    port = port or cfg['web']['port']
    click.echo(f"pesobooks running at http://{host}:{port}")
    uvicorn.run(create_app(cfg), host=host, port=port, log_level=str(cfg['log_level']).lower())
