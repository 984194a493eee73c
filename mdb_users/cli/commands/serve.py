"""
Serve command for CLI.

Runs the user service under uvicorn.
"""

import click
import uvicorn

from ...application import create_app
from ...config import ServiceConfig
from ...constants import DEFAULT_HOST, DEFAULT_PORT
from ...exceptions import ConfigurationError
from ...observability import configure_logging


@click.command()
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Interface to bind")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="Port to bind")
@click.option("--mongo-uri", envvar="MONGOURI", help="MongoDB connection URI")
@click.option("--db-name", help="Database name")
@click.option("--collection", "collection_name", help="Users collection name")
@click.option("--log-level", help="Logging level (DEBUG, INFO, ...)")
def serve(
    host: str,
    port: int,
    mongo_uri: str | None,
    db_name: str | None,
    collection_name: str | None,
    log_level: str | None,
) -> None:
    """
    Start the HTTP service.

    Examples:
        mdb-users serve --mongo-uri mongodb://localhost:27017
        MONGOURI=mongodb://mongo:27017 mdb-users serve --port 8080
    """
    config = ServiceConfig(
        mongo_uri=mongo_uri,
        db_name=db_name,
        collection_name=collection_name,
        log_level=log_level,
    )
    try:
        config.validate()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.log_level)
    uvicorn.run(create_app(config), host=host, port=port, log_level=config.log_level.lower())
