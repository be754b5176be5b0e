from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config.settings import settings
from app.routes.humanize import router as humanize_router
from app.routes.logs import router as logs_router
from app.logging_config import configure_logging

# Configure logging to suppress socket errors from client disconnections
configure_logging()

# Create FastAPI instance
app = FastAPI(
    title=settings.APP_NAME,
    description="Rewrites AI-generated text to read more naturally using Google Gemini",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(humanize_router, prefix=settings.API_V1_STR)
app.include_router(logs_router, prefix=settings.API_V1_STR)

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "description": "Humanize AI-generated text with subtle, balanced, strong or stealth rewrites",
        "providers": {
            "generation": f"Google Gemini ({settings.HUMANIZER_MODEL})"
        },
        "documentation": "/docs",
        "endpoints": {
            "humanize": f"{settings.API_V1_STR}/humanize",
            "modes": f"{settings.API_V1_STR}/humanize/modes",
            "diff": f"{settings.API_V1_STR}/humanize/diff",
            "logs": f"{settings.API_V1_STR}/logs"
        }
    }

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
