"""
Flask extensions shared by the app factory and component routes
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Limits come from RATELIMIT_* settings when init_app runs
limiter = Limiter(key_func=get_remote_address)
