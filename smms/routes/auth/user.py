from flask import jsonify
from flask_login import UserMixin
from smms.database import users_collection
from smms.extensions import login_manager
from smms.utils.serializers import parse_object_id

ROLES = ("student", "teacher")


class SessionUser(UserMixin):
    def __init__(self, user):
        self.id = str(user["_id"])
        self.object_id = user["_id"]
        self.full_name = user.get("fullName")
        self.email = user.get("email")
        self.role = user.get("role", "student")

    @property
    def is_student(self):
        return self.role == "student"


@login_manager.user_loader
def load_user(user_id):
    object_id = parse_object_id(user_id)
    if object_id is None:
        return None
    user = users_collection().find_one({"_id": object_id})
    return SessionUser(user) if user else None


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({"success": False, "message": "Unauthorized. Please login."}), 401
