# main.py
# FastAPI application entry point for the clienticon lookup service

from fastapi import FastAPI

# Import routers
from .routes.appinfo import router as appinfo_router


# Create FastAPI app
app = FastAPI(
    title="Steam clienticon API",
    description="Looks up Steam app icon ids in the local appinfo.vdf cache",
    version="1.0.0",
)

# Include routers
app.include_router(appinfo_router)
