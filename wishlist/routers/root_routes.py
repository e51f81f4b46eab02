from fastapi import APIRouter

router = APIRouter()


@router.get("/")
def root():
    return {"message": "Wishlist server is running!"}
