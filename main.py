from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from config import CORS_ORIGINS
from modules.auth.routes import router as auth_router
from modules.cart.routes import router as cart_router
from modules.catalog.category_routes import router as category_router
from modules.catalog.routes import router as product_router
from utils.log import get_logger

logger = get_logger("main")

app = FastAPI(
    title="SVD Mebel Shop API",
    description="Furniture catalog and shopping cart backend for the SVD Mebel mobile app.",
    version="1.0.0",
)

# The mobile client talks to the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(category_router)
app.include_router(product_router)
app.include_router(cart_router)

logger.info("SVD Mebel Shop API initialised")


@app.get("/health", tags=["Health"], response_class=JSONResponse)
def health_check() -> dict:
    """
    Health check endpoint to confirm backend status.
    """
    return {
        "status": "SVD Mebel Shop API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
