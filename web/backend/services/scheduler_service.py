#!/usr/bin/env python3
"""
Scheduler service - inspect and control the background schedulers.
"""

import logging
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from core.app_context import AppContext
from pipeline.scheduler import PeriodicScheduler
from ..models.responses import SchedulerStatus
from ..exceptions import SchedulerNotFoundException
from ..utils import safe_datetime_iso

logger = logging.getLogger(__name__)

_BASE_FIELDS = ('name', 'is_running', 'interval_seconds', 'last_run_at', 'next_run_at', 'run_count', 'last_error')


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return safe_datetime_iso(value)
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_jsonable(item) for item in value]
    return value


class SchedulerService:
    def __init__(self, context: AppContext):
        self.context = context

    def get(self, name: str) -> PeriodicScheduler:
        scheduler = self.context.schedulers.get(name)
        if scheduler is None:
            raise SchedulerNotFoundException(
                f"Unknown scheduler '{name}'. Available: {', '.join(self.context.schedulers)}"
            )
        return scheduler

    def list_statuses(self) -> List[SchedulerStatus]:
        return [self.to_status(scheduler) for scheduler in self.context.schedulers.values()]

    def run(self, name: str) -> Optional[Dict[str, Any]]:
        scheduler = self.get(name)
        logger.info(f"Manual run of {name} requested")
        result = scheduler.run_once()
        if is_dataclass(result):
            return _jsonable(asdict(result))
        return None

    def set_interval(self, name: str, interval_seconds: float) -> SchedulerStatus:
        scheduler = self.get(name)
        scheduler.set_interval(interval_seconds)
        return self.to_status(scheduler)

    @staticmethod
    def to_status(scheduler: PeriodicScheduler) -> SchedulerStatus:
        status = scheduler.get_status()
        extra = {key: value for key, value in status.items() if key not in _BASE_FIELDS}
        return SchedulerStatus(
            name=status['name'],
            is_running=status['is_running'],
            interval_seconds=status['interval_seconds'],
            last_run_at=safe_datetime_iso(status['last_run_at']),
            next_run_at=safe_datetime_iso(status['next_run_at']),
            run_count=status['run_count'],
            last_error=status['last_error'],
            extra=_jsonable(extra)
        )
