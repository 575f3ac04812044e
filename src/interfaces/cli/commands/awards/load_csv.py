"""Load the movie list from a CSV file."""

import asyncio

from pathlib import Path

import click

from src.application.dtos.upload_movies_dto import (
    UploadMoviesInputDto,
    UploadMoviesOutputDto,
)
from src.interfaces.cli.base import with_error_handling
from src.interfaces.factories.usecase_factory import UseCaseFactory


@click.command("load-csv")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@with_error_handling
def load_csv(ctx: click.Context, path: Path):
    """Replace the stored movies with the contents of PATH."""
    factory: UseCaseFactory = ctx.obj["factory"]
    output = asyncio.run(_run_load_csv(factory, path))

    if not output.success:
        click.echo(f"Error: {output.error_message}", err=True)
        _echo_invalid_records(output)
        ctx.exit(1)

    click.echo("=== CSV loaded ===")
    click.echo(f"  Records:  {output.total_records:,}")
    click.echo(f"  Loaded:   {output.loaded_count:,}")
    click.echo(f"  Winners:  {output.winner_count:,}")
    click.echo(f"  Invalid:  {output.invalid_count:,}")
    _echo_invalid_records(output)


async def _run_load_csv(factory: UseCaseFactory, path: Path) -> UploadMoviesOutputDto:
    try:
        await factory.init_storage()
        async with factory.movie_repository() as repository:
            usecase = factory.upload_movies_usecase(repository)
            return await usecase.execute(
                UploadMoviesInputDto(content=path.read_bytes(), filename=path.name)
            )
    finally:
        await factory.dispose()


def _echo_invalid_records(output: UploadMoviesOutputDto) -> None:
    for item in output.invalid_records:
        click.echo(f"  line {item.line_number}: {'; '.join(item.errors)}", err=True)
