"""
Error Handlers for FlashyCardy

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any

import pydantic


class FlashyCardyError(Exception):
    """Base exception class for FlashyCardy."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class NotFoundError(FlashyCardyError):
    """Resource not found."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ValidationError(FlashyCardyError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class AuthenticationError(FlashyCardyError):
    """Login required or credentials rejected."""

    def __init__(self, message: str = 'Unauthorized'):
        super().__init__(
            message=message,
            code='UNAUTHENTICATED',
            status_code=401
        )


class AIServiceError(FlashyCardyError):
    """The AI provider could not produce a usable answer."""

    def __init__(self, message: str = 'Failed to generate cards with AI', reason: str = None):
        super().__init__(
            message=message,
            code='AI_UNAVAILABLE',
            status_code=503,
            details={'reason': reason} if reason else None
        )


def validation_error_from_pydantic(error: pydantic.ValidationError) -> ValidationError:
    """Flatten pydantic errors into ``{field: [messages]}``."""
    field_errors: Dict[str, list] = {}
    for item in error.errors():
        location = '.'.join(str(part) for part in item.get('loc', ())) or '__root__'
        message = item.get('msg', 'Invalid value')
        if message.startswith('Value error, '):
            message = message[len('Value error, '):]
        field_errors.setdefault(location, []).append(message)
    return ValidationError('Validation failed', errors=field_errors)


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None, status_code: int = 200, **extra):
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    response.update(extra)
    return jsonify(response), status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(FlashyCardyError)
    def handle_flashycardy_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message}")
        else:
            current_app.logger.info(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(pydantic.ValidationError)
    def handle_pydantic_error(error):
        converted = validation_error_from_pydantic(error)
        return jsonify(converted.to_dict()), converted.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
