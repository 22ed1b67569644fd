import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from database.connection import init_db
from app.api import api_router
from app.api.deps import get_hub_client
from app.core.config import settings
from app.core.errors import GatewayError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    init_db()
    yield
    # Shutdown
    get_hub_client().close()


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    logger.warning(f"Gateway error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=502, content={"detail": exc.message})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Checkout Customizer",
        description="Versioned checkout customization builds",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "VtexIdclientAutCookie"],
    )

    app.add_exception_handler(GatewayError, gateway_error_handler)

    # Include all routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
