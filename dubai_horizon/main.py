import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from dubai_horizon.config import get_log_level, get_port, get_upload_dir
from dubai_horizon.routes import admin, auth, bookings, cart, destinations, itinerary
from dubai_horizon.routes.admin import UPLOAD_URL_PATH

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

app = FastAPI(
    title="Dubai Horizon API",
    description="Tourism booking backend: destinations, wishlist and cart, bookings, reviews, admin tools and an AI itinerary planner",
    version="0.1.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development, in production restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix=API_PREFIX)
app.include_router(destinations.router, prefix=API_PREFIX)
app.include_router(cart.cart_router, prefix=API_PREFIX)
app.include_router(cart.wishlist_router, prefix=API_PREFIX)
app.include_router(bookings.router, prefix=API_PREFIX)
app.include_router(admin.router, prefix=API_PREFIX)
app.include_router(itinerary.router, prefix=API_PREFIX)

os.makedirs(get_upload_dir(), exist_ok=True)
app.mount(UPLOAD_URL_PATH, StaticFiles(directory=get_upload_dir()), name="uploads")


@app.get("/")
async def root():
    return {
        "message": "Welcome to the Dubai Horizon API",
        "documentation": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("dubai_horizon.main:app", host="0.0.0.0", port=get_port(), reload=True)
