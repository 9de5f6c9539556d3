"""
api/app.py
FastAPI application entry point.
Run with:  uvicorn api.app:app --port 8000
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse


def create_app(app_settings=None, service=None, summarizer=None) -> FastAPI:
    """
    Build the API.  The tracking service is created here from the settings'
    provider configuration unless one is injected.
    """
    from api.models import ErrorResponse
    from api.routes import router
    from config.settings import settings
    from explanation.generator import TrackingSummaryGenerator
    from tracking.service import TrackingService

    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.api_version,
        description=(
            "Container and vessel tracking for the freight-forwarding dashboard. "
            "Normalizes tracking provider payloads into one shape, derives shipment "
            "status from the latest event, and serves demo data when the provider "
            "is unavailable."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings         = app_settings
    app.state.tracking_service = service or TrackingService(app_settings.provider_config())
    app.state.summarizer       = summarizer or TrackingSummaryGenerator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def _global_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Internal server error", detail=str(exc)).model_dump(by_alias=True),
        )

    app.include_router(router, prefix="/api/v1", tags=["Tracking"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.app:app", host="0.0.0.0", port=8000, log_level="info")
