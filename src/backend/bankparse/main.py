import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from bankparse.config import settings

logging.getLogger("bankparse").setLevel(settings.LOG_LEVEL)

app = FastAPI(
    title="BankParse API",
    description="Transaction extraction from Brazilian bank app notifications",
    version="0.1.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {
        "message": "BankParse API",
        "version": "0.1.0",
        "status": "running"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

# Import routers
from bankparse.routers import notifications

# Include routers
app.include_router(notifications.router)
