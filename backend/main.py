from dotenv import load_dotenv

# Load environment variables before config is read
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from colorwheel.api.v1 import router as v1_router
from colorwheel.config import config
from colorwheel.schemas import HealthResponse
from colorwheel.utils.logging import get_logger


app = FastAPI(
    title="ColorWheel Harmony Backend",
    description="RGB/HSV conversion and color harmony derivation for the color picker wheel",
    version=config.VERSION
)

# Add CORS middleware for the picker frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"]
)

app.include_router(v1_router)

get_logger().info("ColorWheel service initialised", extra={
    "version": config.VERSION,
    "default_combination": config.DEFAULT_COMBINATION
})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(
        ok=True,
        version=config.VERSION,
        service=config.SERVICE_NAME
    )


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "ColorWheel Harmony API",
        "version": config.VERSION,
        "docs": "/docs"
    }

