"""
Notifications router — toast queue of the running app.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from app.services.notifications import ToastQueue
from app.utils.response import success_response

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


def get_toast_queue(request: Request) -> ToastQueue:
    return request.app.state.toasts


@router.get("")
async def list_notifications(toasts: ToastQueue = Depends(get_toast_queue)):
    toasts.expire()
    return success_response(data=[t.model_dump(by_alias=True) for t in toasts.active()])


@router.delete("/{toast_id}")
async def dismiss_notification(toast_id: str, toasts: ToastQueue = Depends(get_toast_queue)):
    if not toasts.remove(toast_id):
        raise HTTPException(status_code=404, detail="Notification not found")
    return success_response(message="Notification dismissed")
