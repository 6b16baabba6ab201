from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from controllers.controller_books import create_graphql_router
from repositories.repository_books import BookRepository
from services.service_books import BookCatalog

from loguru import logger


def create_app(settings: Settings | None = None, catalog: BookCatalog | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server ready at: http://{settings.HOST}:{settings.PORT}{settings.GRAPHQL_PATH}")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.catalog = catalog or BookCatalog(BookRepository.seeded())

    app.include_router(create_graphql_router(path=settings.GRAPHQL_PATH, graphql_ide=settings.GRAPHQL_IDE))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Access-Control-Allow-Origin", "Access-Control-Allow-Headers",
                       "Content-Type"]
    )

    return app


app = create_app()

if __name__ == "__main__":
    logger.add(default_settings.LOG_FILE, retention=default_settings.LOG_RETENTION)
    uvicorn.run("main:app", host=default_settings.HOST, port=default_settings.PORT)
