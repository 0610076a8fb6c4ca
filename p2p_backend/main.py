import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from . import crud
from .config import Settings, settings as default_settings
from .database import close_engine, create_engine, create_sessionmaker, get_db, init_models
from .errors import AdServiceError, StorageError, service_error_handler, validation_error_handler
from .schemas import AdCreate, AdResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "P2P Crypto Backend is running!"


@router.get("/ads", response_model=List[AdResponse])
async def list_ads(db: AsyncSession = Depends(get_db)):
    try:
        return await crud.list_ads(db)
    except SQLAlchemyError as exc:
        logger.error("Error fetching ads: %s", exc)
        raise StorageError("Failed to fetch ads") from exc


@router.post("/ads", response_model=AdResponse, status_code=status.HTTP_201_CREATED)
async def create_ad(ad: AdCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await crud.create_ad(db, ad)
    except (SQLAlchemyError, OverflowError) as exc:
        # OverflowError: integers past SQLite's 64-bit range
        logger.error("Error creating ad: %s", exc)
        await db.rollback()
        raise StorageError("Failed to create ad") from exc


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(settings.DATABASE_URL)
        app.state.sessionmaker = create_sessionmaker(engine)
        await init_models(engine)
        try:
            yield
        finally:
            await close_engine(engine)

    app = FastAPI(title="P2P Crypto Backend", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AdServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)
    return app


app = create_app()


class Server(uvicorn.Server):
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server running on port %s", self.config.port)


def run() -> None:
    logging.basicConfig(
        level=default_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = uvicorn.Config(app, host=default_settings.HOST, port=default_settings.PORT, log_config=None)
    Server(config).run()
