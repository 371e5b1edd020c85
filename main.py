"""Object store emulator application.

Buckets are directories under the storage root and objects are files inside
them. Run with ``python main.py`` or ``uvicorn main:app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from api.bucket_routes import router as bucket_router
from api.health_routes import router as health_router
from api.object_routes import router as object_router
from config.logging_config import print_startup_info, setup_console_logging
from config.storage_config import StorageConfig, load_storage_config
from storage.mime_types import ExtensionMap
from storage.object_store import ObjectStore

load_dotenv()

logger = logging.getLogger("uvicorn")

SERVICE_NAME = "local-object-store"
SERVICE_VERSION = "1.0.0"


def create_app(config: Optional[StorageConfig] = None) -> FastAPI:
    """Build the FastAPI app.

    Configuration is read from the environment at startup unless an explicit
    StorageConfig is given.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        storage_config = config or load_storage_config()

        store = ObjectStore(storage_config)
        store.initialize()
        extension_map = ExtensionMap.load(storage_config.mime_types_file)

        app.state.config = storage_config
        app.state.object_store = store
        app.state.extension_map = extension_map

        print_startup_info(storage_config, len(extension_map))
        yield
        logger.info("Object store shutting down")

    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION, lifespan=lifespan)
    app.include_router(object_router)
    app.include_router(bucket_router)
    app.include_router(health_router)
    return app


setup_console_logging()
app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    config = load_storage_config()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
