# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging.config
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.appconfig import settings

# Apply logging configuration
logging.config.dictConfig(settings.LOGGING_CONFIG)

# Import routers
from app.database.connection import create_tables
from app.shared.error_handlers import register_error_handlers
from app.system_services.appointment_routes import router as appointment_router
from app.system_services.billing_routes import router as billing_router
from app.system_services.pharmacy_routes import router as pharmacy_router
from app.system_services.system_routes import router as system_router
from app.users.user_routes import router as user_router

logger = logging.getLogger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    print("\n===============================================================================")
    print(f" 🚀 Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    print(f" ✅ Database: {settings.DATABASE_URL.split('://', 1)[0]}")
    print(f" ✅ Auto-create tables: {settings.AUTO_CREATE_TABLES}")
    print(f" ✅ Page size: {settings.DEFAULT_PAGE_SIZE} (max {settings.MAX_PAGE_SIZE})")
    print(f" ✅ Log level: {settings.LOG_LEVEL}")
    print("===============================================================================\n")
    if settings.AUTO_CREATE_TABLES:
        await create_tables()
    yield
    # Shutdown
    logger.info("👋 Shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Patients, doctors, appointments, prescriptions, pharmacy stock and invoicing",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

register_error_handlers(app)

# Include routers with prefixes
app.include_router(system_router, prefix="/api", tags=["Registry"])
app.include_router(appointment_router, prefix="/api/appointments", tags=["Appointments"])
app.include_router(pharmacy_router, prefix="/api", tags=["Pharmacy"])
app.include_router(billing_router, prefix="/api/invoices", tags=["Billing"])
app.include_router(user_router, prefix="/api/users", tags=["Users"])


@app.get("/api/health", tags=["Health"])
async def health():
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
