"""
In-memory log buffer for the System Logs panel
"""
import logging
from datetime import datetime


class ActivityLogHandler(logging.Handler):
    """Mirror log records into a bounded deque the dashboard can read"""

    def __init__(self, buffer, level=logging.INFO):
        super().__init__(level=level)
        self.buffer = buffer

    def emit(self, record):
        try:
            self.buffer.append({
                'timestamp': datetime.fromtimestamp(record.created).isoformat(),
                'level': record.levelname,
                'logger': record.name,
                'message': record.getMessage()
            })
        except Exception:
            self.handleError(record)


def install_activity_log(buffer, level=logging.INFO):
    """Attach one ActivityLogHandler to the portal's package logger"""
    package_logger = logging.getLogger('office_portal')
    for handler in package_logger.handlers:
        if isinstance(handler, ActivityLogHandler) and handler.buffer is buffer:
            return handler
    handler = ActivityLogHandler(buffer, level=level)
    package_logger.addHandler(handler)
    if package_logger.level == logging.NOTSET or package_logger.level > level:
        package_logger.setLevel(level)
    return handler
