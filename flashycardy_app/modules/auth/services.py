"""
Auth Service - registration and credential checks.

Decouples DB logic from routes.
"""
from flask import current_app
from sqlalchemy import or_

from ...core.error_handlers import AuthenticationError, ValidationError
from ...extensions import db
from ...models import User


class AuthService:
    """Service for authentication related operations."""

    @staticmethod
    def register_user(username, email, password):
        """
        Register a new user.

        Raises:
            ValidationError: username or email already taken.
        """
        existing = User.query.filter(or_(User.username == username, User.email == email)).first()
        if existing:
            field = 'username' if existing.username == username else 'email'
            raise ValidationError(
                f'That {field} is already registered',
                errors={field: ['Already registered']},
            )

        user = User(username=username, email=email)
        user.set_password(password)
        db.session.add(user)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(f"User registered: {username} ({user.user_id})")
        return user

    @staticmethod
    def authenticate_user(username_or_email, password):
        """
        Verify credentials.

        Returns:
            User object if valid, None otherwise.
        """
        user = User.query.filter(
            or_(User.username == username_or_email, User.email == username_or_email)
        ).first()

        if user and user.check_password(password):
            return user

        return None

    @staticmethod
    def login(username_or_email, password):
        user = AuthService.authenticate_user(username_or_email, password)
        if user is None:
            current_app.logger.info(f"Failed login for {username_or_email}")
            raise AuthenticationError('Invalid username or password')
        return user
