from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docgenius.api.dependencies import Services
from docgenius.api.errors import register_error_handlers
from docgenius.api.routes import router
from docgenius.api.schemas import HealthOut
from docgenius.config.settings import Settings
from docgenius.extraction.base import BaseTextExtractor
from docgenius.extraction.factory import ExtractorFactory
from docgenius.generation.base import BaseTextGenerator
from docgenius.generation.factory import GeneratorFactory
from docgenius.processing.cache import ResultCache
from docgenius.processing.intake import UploadIntake
from docgenius.storage.base import BaseRecordStore
from docgenius.storage.memory import MemoryRecordStore


def create_app(
    settings: Settings,
    *,
    store: BaseRecordStore | None = None,
    extractor: BaseTextExtractor | None = None,
    generator: BaseTextGenerator | None = None,
) -> FastAPI:
    """Build the web application and the components it owns.

    Collaborators not passed in are built from settings; each app gets its
    own store unless one is supplied.
    """
    store = store if store is not None else MemoryRecordStore()
    extractor = extractor if extractor is not None else ExtractorFactory.create(settings)
    generator = generator if generator is not None else GeneratorFactory.create(settings)

    app = FastAPI(title="AI Document Genius", version=settings.app_version)
    app.state.services = Services(
        settings=settings,
        store=store,
        cache=ResultCache(store, generator),
        intake=UploadIntake(
            store,
            extractor,
            upload_dir=settings.upload_dir,
            max_upload_bytes=settings.max_upload_bytes,
        ),
    )

    allow_all = "*" in settings.cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)

    @app.get("/healthz", response_model=HealthOut)
    async def healthz() -> HealthOut:
        return HealthOut(status="ok", version=settings.app_version)

    return app
