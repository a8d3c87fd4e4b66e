"""
SIGO Gateway
Same-origin gateway between the SIGO UI and the SIGO backend API
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sigo_gateway.config import Settings, get_settings
from sigo_gateway.routes import clientes, cores, funcionarios, health, marcas, servicos, veiculos
from sigo_gateway.services.backend_gateway import BackendGateway
from sigo_gateway.utils.logger import get_logger, init_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, gateway: Optional[BackendGateway] = None) -> FastAPI:
    """Build the FastAPI application; settings and gateway may be injected"""
    settings = settings or get_settings()
    init_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        logger.info("Service starting up", service=settings.service_name)
        settings.log_config()
        app.state.gateway = gateway or BackendGateway(settings)

        yield

        logger.info("Service shutting down", service=settings.service_name)
        await app.state.gateway.close()

    app = FastAPI(
        title="SIGO Gateway",
        description="Backend gateway for the SIGO repair shop management system",
        version=settings.service_version,
        lifespan=lifespan
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(clientes.router, prefix="/api/clientes", tags=["Clientes"])
    app.include_router(funcionarios.router, prefix="/api/funcionarios", tags=["Funcionarios"])
    app.include_router(servicos.router, prefix="/api/servicos", tags=["Servicos"])
    app.include_router(marcas.router, prefix="/api/marcas", tags=["Marcas"])
    app.include_router(cores.router, prefix="/api/cores", tags=["Cores"])
    app.include_router(veiculos.router, prefix="/api/veiculos", tags=["Veiculos"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "status": "running",
            "version": settings.service_version
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sigo_gateway.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=get_settings().port
    )
