#!/usr/bin/env python3
"""
Notification endpoints - a user's in-app notification feed.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.notification_service import UserNotificationService
from ..models.responses import (
    NotificationsResponse,
    UnreadCountResponse,
    NotificationActionResponse
)

router = APIRouter(prefix="/api/users/{user_id}/notifications", tags=["notifications"])


def get_notification_service(db: Session = Depends(get_db)) -> UserNotificationService:
    """Dependency to get notification service."""
    return UserNotificationService(db)


@router.get("", response_model=NotificationsResponse)
def list_notifications(
    user_id: str,
    limit: int = Query(default=50, ge=1, le=200, description="Maximum notifications to return"),
    offset: int = Query(default=0, ge=0, description="Number of notifications to skip"),
    service: UserNotificationService = Depends(get_notification_service)
):
    """Get a user's notifications, newest first."""
    notifications = service.list_notifications(user_id, limit=limit, offset=offset)
    return NotificationsResponse(
        success=True,
        count=len(notifications),
        total=service.count(user_id),
        unread_count=service.unread_count(user_id),
        notifications=notifications
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
def get_unread_count(
    user_id: str,
    service: UserNotificationService = Depends(get_notification_service)
):
    return UnreadCountResponse(success=True, unread_count=service.unread_count(user_id))


@router.put("/read-all", response_model=NotificationActionResponse)
def mark_all_read(
    user_id: str,
    service: UserNotificationService = Depends(get_notification_service)
):
    updated = service.mark_all_read(user_id)
    return NotificationActionResponse(
        success=True,
        message="All notifications marked as read",
        updated=updated
    )


@router.put("/{notification_id}/read", response_model=NotificationActionResponse)
def mark_read(
    user_id: str,
    notification_id: str,
    service: UserNotificationService = Depends(get_notification_service)
):
    service.mark_read(user_id, notification_id)
    return NotificationActionResponse(success=True, message="Notification marked as read", updated=1)


@router.delete("/{notification_id}", response_model=NotificationActionResponse)
def delete_notification(
    user_id: str,
    notification_id: str,
    service: UserNotificationService = Depends(get_notification_service)
):
    service.delete(user_id, notification_id)
    return NotificationActionResponse(success=True, message="Notification deleted", updated=1)
