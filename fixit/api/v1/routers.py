from fastapi import APIRouter
from fixit.api.v1 import auth, repair_requests, users, inventory, maintenance, notifications

api_router = APIRouter()

# Session login
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Repair tickets
api_router.include_router(repair_requests.router, prefix="/repair-requests", tags=["repair-requests"])

# Ticket change notifications
api_router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])

# User management (staff)
api_router.include_router(users.router, prefix="/users", tags=["users"])

# Spare parts inventory (staff)
api_router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])

# Preventive maintenance schedule (staff)
api_router.include_router(maintenance.router, prefix="/maintenance", tags=["maintenance"])
