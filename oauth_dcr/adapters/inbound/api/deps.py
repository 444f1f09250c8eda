# oauth_dcr/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for the registration endpoints.
"""

from fastapi import Request

from oauth_dcr.application.ports.inbound import IClientRegistrationUseCase


def get_registration_service(request: Request) -> IClientRegistrationUseCase:
    """
    Provide the registration service built at application startup.

    Args:
        request: Current request, used to reach the application state

    Returns:
        The application's registration use case
    """
    return request.app.state.registration_service
