import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from commander import __version__
from commander.api import create_api_router
from commander.core.config import Settings, get_settings
from commander.core.logging import configure_logging
from commander.infrastructure.database.session import dispose_engine, init_db
from commander.modules.commands import Platform

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent

PLATFORM_ICONS = {
    Platform.WINDOWS: "🪟",
    Platform.POWERSHELL: "🧩",
    Platform.LINUX: "🐧",
    Platform.MAC: "🍎",
    Platform.NETWORK: "🌐",
}


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("%s %s ready", app.title, __version__)
    yield
    await dispose_engine()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    if not settings.admin_key:
        logger.warning("No admin key configured; every write will be refused")

    app = FastAPI(
        title=settings.project_name,
        description="Searchable catalog of operational commands",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    # appended as ?v= to static asset URLs
    app.state.static_version = __version__

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    static_dir = _resolve_path(settings.static_dir)
    templates = Jinja2Templates(directory=str(_resolve_path(settings.template_dir)))

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    app.include_router(create_api_router(settings.api_prefix))

    def page_context() -> dict:
        return {
            "project_name": settings.project_name,
            "api_base": f"{settings.api_prefix}/commands",
            "admin_key_header": settings.admin_key_header,
            "platforms": [(platform.value, icon) for platform, icon in PLATFORM_ICONS.items()],
            "static_version": app.state.static_version,
        }

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def homepage(request: Request):
        return templates.TemplateResponse(request, "index.html", page_context())

    @app.get("/admin", response_class=HTMLResponse, include_in_schema=False)
    async def admin_page(request: Request):
        return templates.TemplateResponse(request, "admin.html", page_context())

    return app


app = create_app()
