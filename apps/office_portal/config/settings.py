"""
Portal configuration settings
"""
import os
from datetime import timedelta


class PortalConfig:
    """Centralized configuration for the office portal"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    PERMANENT_SESSION_LIFETIME = timedelta(hours=8)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"
    LOGIN_RATE_LIMIT = "10 per minute"

    # Backend REST service (APIURL)
    API_URL = os.environ.get('PORTAL_API_URL', 'http://localhost:8080').rstrip('/')
    REQUEST_TIMEOUT = float(os.environ.get('PORTAL_REQUEST_TIMEOUT', 10))

    LOG_LEVEL = os.environ.get('PORTAL_LOG_LEVEL', 'INFO')
    MAX_LOG_ENTRIES = 1000

    # Finance overview
    MONTHLY_BUDGET = 25000

    # Login redirect table - first matching role wins
    ROLE_HOMES = [
        ('ADMIN', '/admin'),
        ('STORE', '/store'),
        ('FINANCE', '/finance-manager/dashboard'),
        ('HR', '/hr'),
        ('DATAMANAGER', '/data-manager'),
    ]
    DEFAULT_HOME = '/dashboard'
    EMPLOYEE_HOME = '/employee'

    # Roles allowed into each area of the portal
    AREA_ROLES = {
        'admin': ['ADMIN'],
        'store': ['STORE', 'ADMIN'],
        'finance-manager': ['FINANCE', 'ADMIN'],
        'hr': ['HR', 'ADMIN'],
        'data-manager': ['DATAMANAGER', 'ADMIN'],
    }

    # Sidebar entries per area
    NAV_ITEMS = {
        'admin': [
            {'id': 'dashboard', 'label': 'Dashboard', 'path': '/admin'},
            {'id': 'hr', 'label': 'Employee Management', 'path': '/hr'},
            {'id': 'attendance', 'label': 'Attendance', 'path': '/hr/attendance'},
            {'id': 'finance', 'label': 'Finance', 'path': '/finance-manager/dashboard'},
            {'id': 'store', 'label': 'Inventory', 'path': '/store'},
            {'id': 'data', 'label': 'Data Management', 'path': '/data-manager'},
            {'id': 'reports', 'label': 'Reports', 'path': '/admin/reports'},
            {'id': 'memos', 'label': 'Memos', 'path': '/admin/memos'},
            {'id': 'logs', 'label': 'System Logs', 'path': '/admin/logs'},
        ],
        'store': [
            {'id': 'dashboard', 'label': 'Dashboard', 'path': '/store'},
            {'id': 'regular', 'label': 'Consumables', 'path': '/store/stationary-regular'},
            {'id': 'fixed', 'label': 'Fixed Assets', 'path': '/store/stationary-fixed'},
            {'id': 'lab', 'label': 'Lab Equipment', 'path': '/store/lab-instruments'},
            {'id': 'materials', 'label': 'Materials In/Out', 'path': '/store/materials'},
        ],
        'finance-manager': [
            {'id': 'dashboard', 'label': 'Dashboard', 'path': '/finance-manager/dashboard'},
            {'id': 'rent', 'label': 'Rent', 'path': '/finance-manager/rent'},
            {'id': 'electric', 'label': 'Electricity', 'path': '/finance-manager/electric-bills'},
            {'id': 'salaries', 'label': 'Salaries', 'path': '/finance-manager/salaries'},
            {'id': 'internet', 'label': 'Internet Bills', 'path': '/finance-manager/internet-bills'},
            {'id': 'travel', 'label': 'Travel', 'path': '/finance-manager/travel'},
            {'id': 'petty-cash', 'label': 'Petty Cash', 'path': '/finance-manager/petty-cash'},
        ],
        'hr': [
            {'id': 'dashboard', 'label': 'Dashboard', 'path': '/hr'},
            {'id': 'employees', 'label': 'Employees', 'path': '/hr/employees'},
            {'id': 'attendance', 'label': 'Attendance', 'path': '/hr/attendance'},
            {'id': 'documents', 'label': 'Documents', 'path': '/hr/hr-documents'},
            {'id': 'bank', 'label': 'Bank Details', 'path': '/hr/bank-details'},
            {'id': 'leaves', 'label': 'Leave Requests', 'path': '/hr/leave-requests'},
        ],
        'data-manager': [
            {'id': 'dashboard', 'label': 'Dashboard', 'path': '/data-manager'},
            {'id': 'purchase', 'label': 'Purchases', 'path': '/data-manager/purchase'},
            {'id': 'bank', 'label': 'Bank Documents', 'path': '/data-manager/bank'},
            {'id': 'billing', 'label': 'Billing', 'path': '/data-manager/billing'},
            {'id': 'tender', 'label': 'Tenders', 'path': '/data-manager/tender'},
        ],
        'employee': [
            {'id': 'home', 'label': 'My Dashboard', 'path': '/employee'},
            {'id': 'reports', 'label': 'My Reports', 'path': '/employee/my-reports'},
            {'id': 'payslips', 'label': 'Payslips', 'path': '/employee/payslips'},
        ],
    }

    @classmethod
    def get_area_roles(cls, area):
        """Get the roles allowed into an area"""
        return cls.AREA_ROLES.get(area, [])

    @classmethod
    def get_nav_items(cls, area):
        """Get sidebar entries for an area"""
        return cls.NAV_ITEMS.get(area, [])


class TestingConfig(PortalConfig):
    """Configuration used by the test suite"""

    TESTING = True
    SECRET_KEY = 'testing-secret'
    API_URL = 'http://backend.test'
    RATELIMIT_ENABLED = False
