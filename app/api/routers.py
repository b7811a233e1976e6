from fastapi import APIRouter

from app.api.process import router as process_router

api_router = APIRouter(prefix="/api")
api_router.include_router(process_router)
