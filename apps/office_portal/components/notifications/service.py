"""
Notifications Business Logic
"""
import logging

from office_portal.core.backend_client import BackendError

logger = logging.getLogger(__name__)


class NotificationsService:
    """Service for the admin notification tray"""

    def __init__(self, backend):
        self.backend = backend

    def get_notifications(self, token):
        """Notification list plus unread count; an unavailable backend yields none"""
        try:
            items = self.backend.get_list('/api/notifications', token=token)
        except BackendError as e:
            logger.error(f"Error fetching notifications: {e}")
            items = []
        items = [n for n in items if isinstance(n, dict)]
        return {
            'notifications': items,
            'unread': sum(1 for n in items if not n.get('read')),
        }

    def mark_read(self, notification_id, token):
        self.backend.put(f'/api/notifications/{notification_id}/read', token=token)
        logger.info(f"Notification {notification_id} marked as read")
        return {'id': notification_id, 'read': True}
