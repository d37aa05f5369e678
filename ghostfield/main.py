"""
FastAPI application entry point
"""
from fastapi import FastAPI

from ghostfield.app.api.v1.forms import forms_router
from ghostfield.app.core.config import settings
from ghostfield.app.core.logging_config import setup_logging

setup_logging()

# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Honeypot and obfuscated-name protection for HTML forms",
    version=settings.app_version,
)

# Include routers
app.include_router(forms_router, prefix="/api")


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": f"{settings.app_name} API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
