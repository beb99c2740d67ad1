"""Role-gated endpoints returning the constant values."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from webapi_backend.api.dependencies import get_values_service, require_roles
from webapi_backend.api.services import ValueNotFoundError, ValuesService

USER_ROLE = "User"
ADMIN_ROLE = "Admin"

router = APIRouter(prefix="/api/values", tags=["values"])


@router.get("", response_model=list[str], dependencies=[Depends(require_roles())])
def list_values(
    values_service: ValuesService = Depends(get_values_service),
) -> list[str]:
    """Return every value; any authenticated caller may list them."""

    return values_service.list_values()


# Declared before "/{value_id}" so "admin" is not parsed as a position.
@router.get(
    "/admin", response_model=str, dependencies=[Depends(require_roles(ADMIN_ROLE))]
)
def admin_value(
    values_service: ValuesService = Depends(get_values_service),
) -> str:
    return values_service.admin_value()


@router.get(
    "/{value_id}",
    response_model=str,
    dependencies=[Depends(require_roles(USER_ROLE))],
)
def get_value(
    value_id: int,
    values_service: ValuesService = Depends(get_values_service),
) -> str:
    """Return the value at position ``value_id``."""

    try:
        return values_service.get_value(value_id)
    except ValueNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Value not found"
        ) from exc
