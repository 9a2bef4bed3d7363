import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cldr_territory.api.territories import router as territories_router
from cldr_territory.config import settings
from cldr_territory.registry.loader import get_registry, validate_registry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting CLDR territory service (default locale %s)", settings.DEFAULT_LOCALE)
    registry = get_registry()
    validate_registry(registry)
    logger.info("Territory registry validation passed for locales: %s", ", ".join(registry.locales))
    yield


app = FastAPI(
    title="CLDR Territory Service",
    description="Territory names, containment, flags and currencies from CLDR data",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(territories_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
