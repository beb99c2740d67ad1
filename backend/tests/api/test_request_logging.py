from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.testclient import TestClient

from webapi_backend.api import create_api
from webapi_backend.database import get_identity_context
from webapi_backend.log_config import LOGGER_NAMESPACE, configure_logging

if TYPE_CHECKING:
    import pytest

    from tests.conftest import IdentityStore


def test_access_log_levels_follow_status(
    client: TestClient,
    identity_store: IdentityStore,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO, logger="webapi_backend.access")
    headers = identity_store.headers_for(identity_store.add_user("reader"))

    client.get("/api/values", headers=headers)
    client.get("/api/values/admin", headers=headers)

    access = [record for record in caplog.records if record.name == "webapi_backend.access"]
    assert [record.levelno for record in access] == [logging.INFO, logging.WARNING]
    assert "GET /api/values 200" in access[0].getMessage()
    assert "Bearer" not in caplog.text


def test_health_is_not_logged(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="webapi_backend.access")

    response = client.get("/health")

    assert response.json() == {"status": "ok"}
    assert not [r for r in caplog.records if r.name == "webapi_backend.access"]


def test_configure_logging_installs_single_handler() -> None:
    logger = configure_logging("debug")
    handlers = len(logger.handlers)

    configure_logging("INFO")

    assert logger.name == LOGGER_NAMESPACE
    assert len(logger.handlers) == handlers
    assert logger.level == logging.INFO


def test_unhandled_error_is_logged_as_server_error(
    caplog: pytest.LogCaptureFixture,
) -> None:
    def broken_context() -> None:
        msg = "db down"
        raise RuntimeError(msg)

    app = create_api()
    app.dependency_overrides[get_identity_context] = broken_context
    caplog.set_level(logging.INFO, logger="webapi_backend.access")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get(
            "/api/values", headers={"Authorization": "Bearer anything"}
        )

    assert response.status_code == 500
    access = [record for record in caplog.records if record.name == "webapi_backend.access"]
    assert len(access) == 1
    assert access[0].levelno == logging.ERROR
    assert "GET /api/values 500" in access[0].getMessage()
