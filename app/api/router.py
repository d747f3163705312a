from fastapi import APIRouter
from app.api import quotes

api_router = APIRouter()

# Add endpoints
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
