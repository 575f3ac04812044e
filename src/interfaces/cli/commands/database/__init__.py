"""Database management CLI commands."""

import asyncio

import click

from src.interfaces.cli.base import with_error_handling
from src.interfaces.factories.usecase_factory import UseCaseFactory


@click.group()
def database():
    """Database management commands."""
    pass


@database.command()
@click.pass_context
@with_error_handling
def init(ctx: click.Context):
    """Create the movies table."""
    factory: UseCaseFactory = ctx.obj["factory"]
    if factory.settings.repository_backend != "database":
        click.echo("Repository backend is not 'database'; nothing to create.")
        return
    asyncio.run(_run_init(factory))
    click.echo("Database tables created.")


@database.command()
@click.pass_context
@with_error_handling
def count(ctx: click.Context):
    """Show how many movies and winners are stored."""
    factory: UseCaseFactory = ctx.obj["factory"]
    total, winners = asyncio.run(_run_count(factory))
    click.echo(f"Movies:  {total:,}")
    click.echo(f"Winners: {winners:,}")


async def _run_init(factory: UseCaseFactory) -> None:
    try:
        await factory.init_storage()
    finally:
        await factory.dispose()


async def _run_count(factory: UseCaseFactory) -> tuple[int, int]:
    try:
        await factory.init_storage()
        async with factory.movie_repository() as repository:
            return await repository.count(), len(await repository.get_winners())
    finally:
        await factory.dispose()
