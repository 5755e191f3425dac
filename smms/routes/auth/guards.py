from flask import jsonify
from flask_login import current_user
from functools import wraps
from smms.extensions import login_manager


def login_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        return f(*args, **kwargs)
    return wrapper


def role_required(role, message):
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if not current_user.is_authenticated:
                return login_manager.unauthorized()
            if current_user.role != role:
                return jsonify({"success": False, "message": message}), 403
            return f(*args, **kwargs)
        return wrapper
    return decorator


teacher_required = role_required("teacher", "Forbidden: Requires teacher role.")
student_required = role_required("student", "Forbidden: Requires student role.")
