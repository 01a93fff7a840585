#!/usr/bin/env python3
"""
Scheduler endpoints - status, manual runs and interval changes.
"""

from fastapi import APIRouter, Depends

from core.app_context import AppContext
from ..dependencies import get_app_context
from ..services.scheduler_service import SchedulerService
from ..models.requests import IntervalUpdate
from ..models.responses import SchedulersResponse, SchedulerRunResponse

router = APIRouter(prefix="/api/schedulers", tags=["schedulers"])


def get_scheduler_service(context: AppContext = Depends(get_app_context)) -> SchedulerService:
    return SchedulerService(context)


@router.get("", response_model=SchedulersResponse)
def list_schedulers(service: SchedulerService = Depends(get_scheduler_service)):
    return SchedulersResponse(success=True, schedulers=service.list_statuses())


@router.post("/{name}/run", response_model=SchedulerRunResponse)
def run_scheduler(name: str, service: SchedulerService = Depends(get_scheduler_service)):
    """
    Run one tick now, on the request thread.

    Tick errors are logged and reported through `last_error`.
    """
    result = service.run(name)
    return SchedulerRunResponse(
        success=True,
        scheduler=service.to_status(service.get(name)),
        result=result
    )


@router.put("/{name}/interval", response_model=SchedulerRunResponse)
def set_scheduler_interval(
    name: str,
    update: IntervalUpdate,
    service: SchedulerService = Depends(get_scheduler_service)
):
    """Change the period; a running scheduler is rearmed."""
    status = service.set_interval(name, update.interval_seconds)
    return SchedulerRunResponse(success=True, scheduler=status)
