# oauth_dcr/adapters/inbound/api/v1/endpoints/register_endpoint.py

"""
Endpoint for OAuth 2.0 Dynamic Client Registration (RFC 7591).

Accepts client metadata as JSON and answers with the registered client
(201) or a registration error (400). Unexpected failures are left to the
exception middleware.
"""

import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from oauth_dcr.adapters.inbound.api.deps import get_registration_service
from oauth_dcr.application.dtos.client_dto import ClientInformation, RegistrationError
from oauth_dcr.application.ports.inbound import IClientRegistrationUseCase

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Client Registration"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ClientInformation,
    response_model_exclude_none=True,
    summary="Register Client - Dynamic client registration",
    description="Registers a new OAuth client from the submitted client metadata.",
    responses={
        201: {
            "description": "Client registered",
            "content": {
                "application/json": {
                    "example": {
                        "redirect_uris": ["https://example.com/cb"],
                        "token_endpoint_auth_method": "client_secret_post",
                        "client_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                        "client_secret": "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08",
                        "client_id_issued_at": 1700000000,
                        "client_secret_expires_at": 1702592000
                    }
                }
            }
        },
        400: {
            "description": "Invalid client metadata",
            "model": RegistrationError,
            "content": {
                "application/json": {
                    "example": {
                        "error": "invalid_client_metadata",
                        "error_description": "redirect_uris: Field required"
                    }
                }
            }
        },
        500: {"description": "Internal Server Error"},
    },
)
async def register_client(
        request: Request,
        service: IClientRegistrationUseCase = Depends(get_registration_service),
):
    """
    Register a client dynamically.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.info(f"Registration request with unparsable body: {e}")
        error = RegistrationError(
            error="invalid_client_metadata",
            error_description="Request body must be a JSON object",
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.model_dump())

    result = await service.register_client(body)

    if isinstance(result, RegistrationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.model_dump())

    return JSONResponse(status_code=status.HTTP_201_CREATED, content=result.model_dump(mode="json"))
