"""CLI commands for RSVP management."""

import asyncio
from uuid import UUID

import typer
import uvicorn

from src.config.database import upgrade_database
from src.config.settings import settings
from src.rsvps.errors import RsvpNotFoundError
from src.rsvps.repository.read_models import SqlRsvpReadModel
from src.rsvps.repository.write_models import SqlRsvpWriteModel

app = typer.Typer(help="CLI commands for RSVP management")


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
):
    """Run the API server."""
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=reload,
    )


@app.command()
def migrate():
    """Upgrade the database schema to the latest revision."""
    asyncio.run(upgrade_database())
    typer.secho("Database is up to date.", fg=typer.colors.GREEN)


@app.command()
def summary():
    """Show response counts and expected head count."""
    result = asyncio.run(SqlRsvpReadModel().get_summary())

    typer.secho("RSVP Summary", fg=typer.colors.GREEN)
    typer.secho(f"  Responses: {result.total_responses}", fg=typer.colors.BLUE)
    typer.secho(f"  Attending: {result.attending}", fg=typer.colors.BLUE)
    typer.secho(f"  Not attending: {result.not_attending}", fg=typer.colors.BLUE)
    typer.secho(f"  Guests: {result.total_guests}", fg=typer.colors.CYAN)
    typer.secho(f"  Children: {result.total_children}", fg=typer.colors.CYAN)
    typer.secho(f"  Total people: {result.total_people}", fg=typer.colors.MAGENTA)


@app.command()
def list_rsvps(
    attending: bool | None = typer.Option(
        None,
        "--attending/--not-attending",
        help="Only show RSVPs with this answer",
    ),
):
    """List RSVPs."""
    read_model = SqlRsvpReadModel()

    async def _list():
        rsvps = await read_model.list_rsvps(attending=attending)
        count = await read_model.count_rsvps(attending=attending)
        return rsvps, count

    rsvps, count = asyncio.run(_list())

    typer.secho(f"{count} RSVP(s)", fg=typer.colors.GREEN)
    for rsvp in rsvps:
        if rsvp.attending:
            party = f"{rsvp.num_of_guests} guest(s), {rsvp.num_of_children} child(ren)"
            typer.secho(f"  - {rsvp.name} <{rsvp.email}>: {party}", fg=typer.colors.BLUE)
        else:
            typer.secho(f"  - {rsvp.name} <{rsvp.email}>: not attending", fg=typer.colors.YELLOW)
        typer.secho(f"    ID: {rsvp.id}", fg=typer.colors.CYAN)


@app.command()
def delete_rsvp(
    rsvp_id: str = typer.Argument(
        ...,
        help="RSVP UUID",
    ),
):
    """Delete an RSVP permanently."""
    try:
        asyncio.run(SqlRsvpWriteModel().delete_rsvp(UUID(rsvp_id)))
        typer.secho(f"RSVP {rsvp_id} deleted.", fg=typer.colors.GREEN)
    except (ValueError, RsvpNotFoundError) as e:
        typer.secho(str(e), fg=typer.colors.RED)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
