from fastapi import APIRouter
from . import opengraph_routes

router = APIRouter()


@router.get("/", tags=["root"])
def root():
    return {"message": "Open Graph reader is running!"}


router.include_router(opengraph_routes.router, prefix="/opengraph", tags=["opengraph"])

__all__ = ["router"]
