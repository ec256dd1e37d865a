"""
Cellar Drinking Window API

FastAPI backend that estimates wine drinking windows and groups
a cellar by drinking status.

Usage:
    uvicorn main:app --reload
"""

# Load environment variables from .env file FIRST
from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Config

# Configure logging from environment
logging.basicConfig(
    level=getattr(logging, Config.log_level(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
logger.info(f"Starting with LOG_LEVEL={Config.log_level()}, DEV_MODE={Config.is_dev()}")

from app.routes import drinking_window_router

app = FastAPI(
    title="Cellar Drinking Window API",
    description="Estimate drinking windows and track when cellar wines are ready",
    version="0.1.0",
)

# CORS middleware for the cellar web app
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # Local Next.js dev
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(drinking_window_router, tags=["drinking-window"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Cellar Drinking Window API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint for container probes."""
    return {"status": "healthy"}
