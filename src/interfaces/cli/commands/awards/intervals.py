"""Show the producers with the minimum and maximum win intervals."""

import asyncio
import json

import click

from src.application.dtos.award_interval_dto import (
    CalculateAwardIntervalsOutputDto,
    ProducerIntervalOutputItem,
)
from src.interfaces.cli.base import with_error_handling
from src.interfaces.factories.usecase_factory import UseCaseFactory


@click.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
@with_error_handling
def intervals(ctx: click.Context, output_format: str):
    """Print the producers with the shortest and longest gap between wins."""
    factory: UseCaseFactory = ctx.obj["factory"]
    output = asyncio.run(_run_intervals(factory))

    if output_format == "json":
        click.echo(json.dumps(output.to_dict(), indent=2, ensure_ascii=False))
        return

    click.echo(f"=== Minimum interval ({len(output.min)}) ===")
    _echo_items(output.min)
    click.echo(f"\n=== Maximum interval ({len(output.max)}) ===")
    _echo_items(output.max)


async def _run_intervals(factory: UseCaseFactory) -> CalculateAwardIntervalsOutputDto:
    try:
        await factory.init_storage()
        async with factory.movie_repository() as repository:
            return await factory.calculate_award_intervals_usecase(repository).execute()
    finally:
        await factory.dispose()


def _echo_items(items: list[ProducerIntervalOutputItem]) -> None:
    if not items:
        click.echo("  (no producer has won twice)")
        return
    for item in items:
        click.echo(
            f"  {item.producer}: {item.interval} years "
            f"({item.previous_win} -> {item.following_win})"
        )
