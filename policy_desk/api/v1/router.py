from fastapi import APIRouter

from policy_desk.api.routers import auth, policies

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(policies.router)
