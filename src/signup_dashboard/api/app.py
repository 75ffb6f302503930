"""FastAPI application factory.

API layer:
- Exposes GET /api/summary backed by a SummaryService
- Serves the front end (public/ and static/) when present
- Forbidden: aggregation logic, row source calls
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from signup_dashboard.aggregation.cache import SummaryService
from signup_dashboard.config import ConfigError, Settings, load_settings
from signup_dashboard.sources.google_sheets import GoogleSheetsRowSource, build_credentials


def get_summary_service(request: Request) -> SummaryService:
    """Dependency returning the application's summary service."""
    return request.app.state.summary_service


def build_summary_service(settings: Settings) -> SummaryService:
    """Wire the Google Sheets source and cache from settings."""
    try:
        credentials = build_credentials(
            settings.google_sheets_client_email,
            settings.google_sheets_private_key,
        )
    except ValueError as e:
        raise ConfigError(f"invalid service account credentials: {e}") from e
    source = GoogleSheetsRowSource(settings.google_sheets_spreadsheet_id, credentials=credentials)
    return SummaryService(
        source,
        ttl_seconds=settings.summary_cache_ttl_seconds,
        serve_stale_on_error=settings.serve_stale_on_error,
    )


def _public_file(public_dir: Path, path: str) -> Path | None:
    """Resolve a request path inside public_dir, None if outside or missing."""
    root = public_dir.resolve()
    candidate = (root / path).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def create_app(
    settings: Settings | None = None,
    service: SummaryService | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Application settings. Loaded from the environment
            when omitted.
        service: Summary service to serve. Built from settings when
            omitted.

    Returns:
        Configured FastAPI application.

    Raises:
        ConfigError: If settings must be loaded and are incomplete.
    """
    if settings is None:
        settings = load_settings()
    if service is None:
        service = build_summary_service(settings)

    app = FastAPI(
        title="Signup Dashboard API",
        description="Signup summary served from a Google Sheet",
        version="0.1.0",
    )
    app.state.settings = settings
    app.state.summary_service = service

    # Add CORS middleware for front-end development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include routes
    from signup_dashboard.api.routes import summary

    app.include_router(summary.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    public_dir = Path(settings.public_dir)

    # Front end: public files, anything else falls back to index.html
    @app.get("/", include_in_schema=False)
    @app.get("/{path:path}", include_in_schema=False)
    def frontend(path: str = ""):
        """Serve a public file or the single-page app shell."""
        if path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not found")
        target = _public_file(public_dir, path) if path else None
        if target is None:
            target = _public_file(public_dir, "index.html")
        if target is None:
            raise HTTPException(status_code=404, detail="Not found")
        return FileResponse(target)

    return app
