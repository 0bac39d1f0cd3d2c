from typing import Optional

import time
from fastapi import FastAPI

from ..config import AppSettings
from ..logging import init_logging
from ..services.pipeline import RainfallPipeline
from .middleware import RequestIDMiddleware
from .routes import health, readings


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or AppSettings()
    init_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service health and uptime"},
            {"name": "readings", "description": "Real-time rain gauge readings"},
        ],
    )
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(readings.router, prefix="/v1/readings", tags=["readings"])

    app.state.settings = settings
    app.state.start_time = time.time()
    # Nothing is fetched until the first request; the cache starts empty
    app.state.pipeline = RainfallPipeline.from_settings(settings)

    return app


if __name__ == "__main__":
    import uvicorn

    s = AppSettings()
    uvicorn.run(create_app(s), host=s.host, port=s.port)
