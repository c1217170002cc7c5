from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api import health, privacy, status
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

setup_logging()

# Create FastAPI app
app = FastAPI(
    title="Paylink API",
    description="Payment links, cross-chain swap status and private USDC payments",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(status.router, tags=["Status"])
app.include_router(privacy.router, tags=["Privacy"])


@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "name": "Paylink API",
        "version": "0.1.0",
        "description": "Payment links, cross-chain swap status and private USDC payments",
        "docs": "/docs",
        "health": "/healthz"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "paylink.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
