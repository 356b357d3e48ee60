from fastapi import APIRouter
from routers.v1.donation_router import donation_router
from routers.v1.reservation_router import reservation_router
from routers.v1.user_router import current_user_router, user_router

router = APIRouter()

router.include_router(user_router)
router.include_router(current_user_router)
router.include_router(reservation_router)
router.include_router(donation_router)
