# oauth_dcr/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from oauth_dcr.adapters.inbound.api.v1.endpoints import register_endpoint

api_router = APIRouter()

# Registration endpoint
api_router.include_router(register_endpoint.router)
