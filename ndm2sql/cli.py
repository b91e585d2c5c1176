# ndm2sql/cli.py
import logging
from typing import Optional

import typer

from ndm2sql.ddl_builder import generate_sql
from ndm2sql.errors import Ndm2SqlError, UsageError
from ndm2sql.loader import load_model, save_sql
from ndm2sql.settings import get_settings

app = typer.Typer(help="Convert an NDM2 JSON model into a SQL DDL script.")
logger = logging.getLogger("ndm2sql.cli")

def _configure_logging(level: Optional[str]) -> None:
    name = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.WARNING))

def _run(input_path: str, output_path: str) -> None:
    if not input_path or not output_path:
        raise UsageError("Usage: ndm2sql <inputFilePath> <outputFilePath>")
    model = load_model(input_path)
    sql = generate_sql(model)
    save_sql(sql, output_path)

@app.command(help="Generate CREATE TABLE / constraint / index DDL from INPUT into OUTPUT.")
def main(
    input_path: str = typer.Argument(..., metavar="INPUT", help="Path to the .ndm2 JSON model"),
    output_path: str = typer.Argument(..., metavar="OUTPUT", help="Path of the .sql file to write (overwritten)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides LOG_LEVEL"),
):
    _configure_logging(log_level)
    try:
        _run(input_path, output_path)
    except UsageError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=2)
    except Ndm2SqlError as e:
        logger.debug("Conversion failed", exc_info=True)
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✅ SQL saved to {output_path} successfully.")

if __name__ == "__main__":
    app()
