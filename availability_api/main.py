from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from availability_api.api.api import api_router
from availability_api.core.config import settings
from availability_api.core.database import SessionLocal, engine
from availability_api.core.errors import STORE_ERRORS, StoreFailure, store_failure_handler
from availability_api.crud.availability import availability as crud_availability

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger = logging.getLogger("uvicorn.error")
    logger.info(f"Server running on http://localhost:{settings.PORT}")
    logger.info(f"Admin panel: http://localhost:{settings.PORT}/admin")

    # Probe only; the table is provisioned by init_db.py
    try:
        async with SessionLocal() as db:
            await crud_availability.exists_check(db)
        logger.info("Database reachable.")
    except STORE_ERRORS as e:
        logger.warning(f"Database check failed: {e}")

    yield
    # Shutdown
    await engine.dispose()

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan
)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_exception_handler(StoreFailure, store_failure_handler)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/", include_in_schema=False)
async def index():
    """Serve the public site."""
    return FileResponse(settings.PUBLIC_DIR / "index.html")

@app.get("/admin", include_in_schema=False)
async def admin_index():
    """Serve the admin panel."""
    return FileResponse(settings.ADMIN_DIR / "index.html")

# Mounted last so API routes take precedence over the public tree
app.mount("/admin", StaticFiles(directory=settings.ADMIN_DIR, html=True, check_dir=False), name="admin")
app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True, check_dir=False), name="public")


def run_server(host: str = settings.HOST, port: int = settings.PORT):
    """Launch the API and static site with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
