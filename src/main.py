import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from src.common.middleware.exception_handlers import register_exception_handlers
from src.common.repositories import Database
from src.configuration.config import settings
from src.modules.listings.controller import router as listings_router
from src.scripts.seed_listings import seed_database

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Metadata configuration for OpenAPI/Swagger
description = """
## Real Estate API

Read-only API over the real-estate listings catalog consumed by the web client.

### Features

* **Pagination** with total count and page metadata
* **Filters** by name, address and price range
* **Data validation** with Pydantic
* **Interactive documentation** with Swagger UI

### Endpoints

* **Listings**: paginated search and lookup by ID
* **Health**: Health endpoints to verify that the service and its database are working.
"""

tags_metadata = [
    {
        "name": "listings",
        "description": "Search listings page by page and obtain a single listing by its ID.",
    },
    {
        "name": "health",
        "description": "Health endpoints to verify that the service is working.",
    },
]

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.database = database
    logger.info("Database connection pool created")

    if settings.SEED_ON_STARTUP:
        try:
            database.create_all()
            inserted = seed_database(database, settings.SEED_COUNT)
            logger.info("Startup seed inserted %s listings", inserted)
        except Exception as e:
            logger.error(f"Error seeding the database: {str(e)}", exc_info=True)

    docs_path = app.docs_url or "/docs"
    swagger_url = f"http://{settings.HOST}:{settings.PORT}{docs_path}"
    logger.info("Swagger UI available at %s", swagger_url)
    yield

    database.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=description,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    license_info={
        "name": "MIT",
    },
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

register_exception_handlers(app)

# Register routers of modules
app.include_router(listings_router, prefix="/api/v1")


@app.get("/", tags=["health"])
def root():
    """Health endpoint to verify that the service is working."""
    return {"message": f"{settings.APP_NAME} is running", "version": settings.APP_VERSION}


@app.get("/health", tags=["health"])
def health_check(request: Request):
    """Health endpoint that also checks the database answers."""
    database: Database = request.app.state.database
    if not database.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "down"},
        )
    return {"status": "healthy", "database": "up"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info" if not settings.DEBUG else "debug",
    )
