"""
FastAPI Dependencies
"""

from fastapi import Request

from sigo_gateway.services.backend_gateway import BackendGateway


def get_gateway(request: Request) -> BackendGateway:
    """Backend gateway created in the application lifespan"""
    return request.app.state.gateway
