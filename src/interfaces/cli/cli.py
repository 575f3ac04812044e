"""award-intervals CLI entry point."""

import click

from src.common.logging import setup_logging
from src.interfaces.cli.base import with_error_handling
from src.interfaces.cli.commands.awards import intervals, load_csv
from src.interfaces.cli.commands.database import database
from src.interfaces.factories.usecase_factory import UseCaseFactory


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL")
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """Award intervals: producers with the shortest and longest gap between wins."""
    ctx.ensure_object(dict)
    if "factory" not in ctx.obj:
        ctx.obj["factory"] = UseCaseFactory()

    settings = ctx.obj["factory"].settings
    setup_logging(log_level or settings.log_level, settings.json_logs)


@main.command()
@click.option("--host", default=None, help="Bind address (defaults to API_HOST)")
@click.option("--port", type=int, default=None, help="Port (defaults to API_PORT)")
@click.pass_context
@with_error_handling
def serve(ctx: click.Context, host: str | None, port: int | None):
    """Run the HTTP API."""
    import uvicorn

    from src.interfaces.web.api.app import create_app

    factory: UseCaseFactory = ctx.obj["factory"]
    settings = factory.settings
    uvicorn.run(
        create_app(factory),
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_config=None,
    )


main.add_command(load_csv)
main.add_command(intervals)
main.add_command(database)


if __name__ == "__main__":
    main()
