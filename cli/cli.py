"""CLI for the exercise tracker.

Developer commands to run the API server, prepare the database and inspect
stored users.
"""

import sys

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.table import Table

from app.config.settings import settings
from app.db.session import get_session, init_db
from app.users.repository import UserRepository

# Initialize Rich console for output
console = Console()

# Initialize Typer app
app = typer.Typer(
    name="exercise-tracker",
    help="Exercise tracker CLI - server and database utilities",
    add_completion=False,
)

def _setup_logging(debug: bool = False) -> None:
    """Set up console logging.

    Args:
        debug: Enable debug logging level
    """
    logger.remove()
    log_level = "DEBUG" if debug else settings.log_level
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{file.name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=log_level,
        colorize=True,
    )


@app.command()
def server(
    host: str = typer.Option(settings.host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


@app.command("init-db")
def init_db_command(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    """Create database tables and check the connection."""
    _setup_logging(debug)
    try:
        init_db()
    except Exception as e:
        console.print(f"[bold red]Database initialization failed:[/bold red] {e}")
        raise typer.Exit(code=1) from e
    console.print("[bold green]Database ready[/bold green]")


@app.command()
def users(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    """List stored users with the size of their exercise logs."""
    _setup_logging(debug)
    with get_session() as session:
        records = UserRepository(session).find_all_users()
        table = Table(title="Users")
        table.add_column("_id", style="cyan")
        table.add_column("username")
        table.add_column("exercises", justify="right")
        for user in records:
            table.add_row(user.id, user.username, str(len(user.log)))
    console.print(table)


if __name__ == "__main__":
    app()
