"""Application-wide extensions.

Extension instances live here so blueprints and services can import them
without circular imports.
"""

from flask_login import LoginManager
from flask_wtf import CSRFProtect

from .db_instance import db

login_manager = LoginManager()

csrf_protect = CSRFProtect()

__all__ = ["db", "login_manager", "csrf_protect"]
