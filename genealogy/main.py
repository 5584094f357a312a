import logging
from collections.abc import Iterable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from genealogy import __version__
from genealogy.core.config import get_settings, resolve_path
from genealogy.core.i18n import Translator
from genealogy.core.logging import configure_logging
from genealogy.infrastructure.database import dispose_engine, init_db
from genealogy.interfaces.http.router import create_api_router, create_page_router
from genealogy.modules.custom import CustomModule, ModuleRegistry

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings)

STATIC_DIR = resolve_path(settings.static_dir)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("%s %s started with %d custom modules", settings.project_name, __version__, len(app.state.modules))
    yield
    await dispose_engine()


def create_app(custom_modules: Iterable[CustomModule] = ()) -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Online genealogy",
        version=__version__,
        lifespan=lifespan,
    )

    registry = ModuleRegistry()
    for module in custom_modules:
        registry.register(module)

    translator = Translator(settings.language)
    registry.apply_translations(translator)

    app.state.modules = registry
    app.state.translator = translator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(create_page_router())

    return app


app = create_app()
