"""
System Logs Service
Reads the in-memory buffer filled by the activity log handler
"""


class SystemLogsService:
    """Service for the System Logs page"""

    def __init__(self, buffer=None):
        self.buffer = buffer

    def _entries(self):
        if self.buffer is not None:
            return list(self.buffer)
        from office_portal.core import system_logs
        return list(system_logs)

    def get_logs(self, level_filter='ALL', limit=50):
        """Most recent log entries, optionally restricted to one level"""
        logs = self._entries()

        if level_filter and level_filter.upper() != 'ALL':
            logs = [log for log in logs if log.get('level') == level_filter.upper()]

        # Keep the newest entries; None means no limit
        if limit is not None:
            logs = logs[-limit:] if limit > 0 else []

        return logs
