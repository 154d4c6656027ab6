"""
Skill Recommender FastAPI Application.

Main application entry point with CORS, logging and router registration.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.dependencies import get_config
from backend.routers import analyze_router, recommend_router
from skill_recommender import __version__
from skill_recommender.logging_config import setup_logging

setup_logging(get_config().log)

# Create FastAPI app
app = FastAPI(
    title="Skill Recommender API",
    description="REST API for personalized learning-resource recommendations",
    version=__version__,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(recommend_router, prefix="/recommend", tags=["recommendations"])
app.include_router(analyze_router, prefix="/analyze", tags=["analysis"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    server = get_config().server
    uvicorn.run(app, host=server.host, port=server.port)
