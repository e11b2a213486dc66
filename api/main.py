import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ach.router import router as ach_router
from core import config, db

logger = logging.getLogger(__name__)


def create_app(database: db.Database | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            app.state.db = database
            yield
            return

        # Open the DB pool once per process.
        app.state.db = await db.Database.connect(config.database_url())
        try:
            yield
        finally:
            await app.state.db.close()

    app = FastAPI(
        title="ACH Calculator API",
        version="1.0.0",
        description="API documentation for ACH Calculator",
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("request_rejected errors=%s", len(exc.errors()))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request"},
        )

    app.include_router(ach_router, tags=["ach"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    # Fail before binding the port when the connection string is missing.
    config.database_url()
    port = config.port()
    logger.info("Server running on port %s", port)
    uvicorn.run(app, host=config.host(), port=port)


if __name__ == "__main__":
    run()
