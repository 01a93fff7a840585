"""API route handlers."""

from .eligibility import router as eligibility_router
from .matching import router as matching_router
from .notifications import router as notifications_router
from .schedulers import router as schedulers_router
