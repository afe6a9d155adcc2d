from flask import request
from flask_login import current_user, login_required, login_user, logout_user
from flask_wtf.csrf import generate_csrf

from ...core.error_handlers import success_response
from ...schemas import LoginInput, RegisterInput
from . import auth_bp as blueprint
from .services import AuthService


@blueprint.route('/csrf-token', methods=['GET'])
def csrf_token():
    """Token for the X-CSRFToken header of later POST/PUT/DELETE calls."""
    return success_response({'csrf_token': generate_csrf()})


@blueprint.route('/register', methods=['POST'])
def register():
    payload = RegisterInput.model_validate(request.get_json(silent=True) or {})
    user = AuthService.register_user(payload.username, payload.email, payload.password)
    login_user(user)
    return success_response(user.to_dict(), message='Account created', status_code=201)


@blueprint.route('/login', methods=['POST'])
def login():
    payload = LoginInput.model_validate(request.get_json(silent=True) or {})
    user = AuthService.login(payload.username, payload.password)
    login_user(user, remember=bool((request.get_json(silent=True) or {}).get('remember')))
    return success_response(user.to_dict(), message='Logged in')


@blueprint.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return success_response(message='Logged out')


@blueprint.route('/me', methods=['GET'])
@login_required
def me():
    return success_response(current_user.to_dict())
