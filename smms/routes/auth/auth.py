from flask import Blueprint, request, jsonify, session
from flask_login import login_user, logout_user, current_user
from pymongo.errors import DuplicateKeyError
import logging
import re
from smms.database import users_collection
from smms.extensions import bcrypt
from smms.routes.auth.user import SessionUser, ROLES

logger = logging.getLogger(__name__)

router = Blueprint("auth", __name__, url_prefix="/api")


def is_valid_email(email):
    return re.match(r"[^@\s]+@[^@\s]+\.[^@\s]+$", email)


def is_valid_password(password):
    return len(password) >= 6


def string_fields(data, *names):
    """Return the named fields, or None when the body is not an object or a field is not a string."""
    if not isinstance(data, dict):
        return None
    values = [data.get(name) or "" for name in names]
    if not all(isinstance(value, str) for value in values):
        return None
    return values


@router.route("/register", methods=["POST"])
def register():
    try:
        fields = string_fields(request.get_json(silent=True), "fullName", "email", "password", "role")
        if fields is None:
            return jsonify({"success": False, "message": "Fields must be text values."}), 400

        full_name, email, password, role = fields
        full_name = full_name.strip()
        email = email.strip().lower()

        if not all([full_name, email, password, role]):
            return jsonify({"success": False, "message": "All fields are required."}), 400

        if role not in ROLES:
            return jsonify({"success": False, "message": "Role must be student or teacher."}), 400

        if not is_valid_email(email):
            return jsonify({"success": False, "message": "Invalid email format."}), 400

        if not is_valid_password(password):
            return jsonify({"success": False, "message": "Password must be at least 6 characters."}), 400

        if users_collection().find_one({"email": email}):
            return jsonify({"success": False, "message": "Email already taken."}), 409

        hashed_password = bcrypt.generate_password_hash(password).decode("utf-8")
        users_collection().insert_one({
            "fullName": full_name,
            "email": email,
            "password": hashed_password,
            "role": role,
        })
        logger.info("Registered %s as %s", email, role)
        return jsonify({"success": True, "message": "Registration successful! Please login."}), 201

    except DuplicateKeyError:
        return jsonify({"success": False, "message": "Email already taken."}), 409
    except Exception as e:
        logger.error(f"Registration error: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error during registration."}), 500


@router.route("/login", methods=["POST"])
def login():
    try:
        fields = string_fields(request.get_json(silent=True), "email", "password")
        if fields is None:
            return jsonify({"success": False, "message": "Fields must be text values."}), 400

        email, password = fields
        email = email.strip().lower()

        if not email or not password:
            return jsonify({"success": False, "message": "Email and password are required."}), 400

        user = users_collection().find_one({"email": email})
        if not user or not bcrypt.check_password_hash(user["password"], password):
            return jsonify({"success": False, "message": "Invalid credentials."}), 401

        session.permanent = True
        login_user(SessionUser(user))
        logger.info("Login for %s", email)

        return jsonify({
            "success": True,
            "message": "Login successful!",
            "role": user["role"],
            "fullName": user["fullName"],
        }), 200

    except Exception as e:
        logger.error(f"Login error: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error during login."}), 500


@router.route("/logout", methods=["POST"])
def logout():
    logout_user()
    session.clear()
    return jsonify({"success": True, "message": "Logged out successfully."}), 200


@router.route("/check-session", methods=["GET"])
def check_session():
    if current_user.is_authenticated:
        return jsonify({
            "success": True,
            "isLoggedIn": True,
            "userId": current_user.id,
            "userRole": current_user.role,
            "userFullName": current_user.full_name,
        }), 200
    return jsonify({"success": True, "isLoggedIn": False}), 200
