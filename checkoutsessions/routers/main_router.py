from typing import List

from fastapi import APIRouter

from checkoutsessions.routers.routes import checkout_router
from checkoutsessions.routers.routes import metrics_router

router = APIRouter()

routers_to_include: List[APIRouter] = [
    # This is the order they show up in openapi.json
    checkout_router.router,
    metrics_router.router,
]

for router_to_include in routers_to_include:
    router.include_router(router_to_include)
