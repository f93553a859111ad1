from fastapi import FastAPI
from .core.config import settings, setup_logging, setup_middleware
from .core.exceptions import register_exception_handlers
from .routers import chat

logger = setup_logging()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Component Builder",
        description="Completion proxy for the component builder UI",
        version="1.0.0",
    )
    setup_middleware(app)
    register_exception_handlers(app)
    api_prefix = "/api"
    app.include_router(chat.router, prefix=api_prefix)
    logger.info("FastAPI application initialized")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info(f"Backend server starting on http://localhost:{settings.PORT}")
    logger.info(f"Chat proxy available at http://localhost:{settings.PORT}/api/chat")
    if not settings.HUGGINGFACE_API_KEY:
        logger.warning("HUGGINGFACE_API_KEY is not set; /api/chat will answer 500")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
