from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import get_settings
from interfaces.api import router as task_router
import logging

# --- Basic Setup ---
settings = get_settings()
logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_title)
    app.include_router(task_router)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    logger.info("Task storage: %s (key %r)", settings.db_path, settings.storage_key)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
