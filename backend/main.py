"""
All-in-One Tools Backend - FastAPI Application Entry Point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routers import config, text
from services.config_manager import ConfigManager

logger = logging.getLogger("allinone_tools")


def first_validation_message(exc: RequestValidationError) -> str:
    """Message of the first failed field, without pydantic's "Value error, " prefix"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, Exception):
        return str(cause)
    return error.get("msg", "Invalid request").removeprefix("Value error, ")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    config_manager = ConfigManager.get_instance()
    logger.info("[Backend] Starting All-in-One Tools backend...")
    logger.info("[Backend] Configuration loaded from %s", config_manager.config_file)

    yield

    logger.info("[Backend] Shutting down All-in-One Tools backend...")


def create_app() -> FastAPI:
    """Build the FastAPI application from the current configuration"""
    settings = ConfigManager.get_instance().get_config()

    app = FastAPI(
        title="All-in-One Tools Backend",
        description="Text utilities: diff, regex tester and explainer, case and base64 conversion",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get("cors", {}).get("allowOrigins", ["*"]),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": first_validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    # Include routers
    app.include_router(text.router, prefix="/api/text", tags=["text"])
    app.include_router(config.router, prefix="/api/config", tags=["config"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "allinone-tools-backend"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get_config().get("server", {})
    logging.basicConfig(
        level=server.get("logLevel", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=server.get("port", 5000))
