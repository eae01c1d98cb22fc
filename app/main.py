## Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.agents.llm.client import get_llm_client
from app.agents.llm.errors import LLMError
from app.logging_setup import setup_logging
from app.settings import Settings, settings as default_settings
from app.teams.routes import router as teams_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        app.state.settings = settings
        # built once, shared read-only by every request
        app.state.llm = get_llm_client(settings)
        app.state.teams_fallback = settings.fallback_teams()
        if app.state.teams_fallback is not None:
            logger.info("Fallback teams enabled ({} entries)", len(app.state.teams_fallback))
        yield

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": settings.app_name}

    @app.exception_handler(LLMError)
    async def llm_error_handler(request: Request, exc: LLMError):
        logger.error("{} {} failed: {}: {}", request.method, request.url.path, exc.kind, exc)
        return JSONResponse(
            {"error": exc.kind, "detail": str(exc)},
            status_code=exc.http_status,
        )

    app.include_router(teams_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
