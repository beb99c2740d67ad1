"""Web API entrypoints."""

from __future__ import annotations

import logging

import click
import uvicorn

from webapi_backend.api import create_api
from webapi_backend.api.services import AuthService, UserNotFoundError
from webapi_backend.database import DatabaseService, IdentityDataContext
from webapi_backend.log_config import configure_logging
from webapi_backend.settings import get_settings

logger = logging.getLogger(__name__)

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    uvicorn.run(
        "webapi_backend.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)


def _database_service() -> DatabaseService:
    return DatabaseService()


@click.command()
@click.argument("username")
@click.argument("role")
def grant_role(username: str, role: str) -> None:
    """Grant ROLE to the existing user USERNAME."""
    configure_logging(get_settings().log_level)
    try:
        with _database_service().session() as session:
            AuthService().grant_role(
                context=IdentityDataContext(session),
                username=username,
                role_name=role,
            )
    except UserNotFoundError as exc:
        logger.error("User %s does not exist", username)
        raise click.ClickException(f"no such user: {username}") from exc

    click.echo(f"{username} is now in role {role}")
