from datetime import datetime
from bson import ObjectId


def parse_object_id(value):
    """Return an ObjectId for ``value`` or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    if value and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def serialize_doc(value):
    """Make a Mongo document JSON friendly (ObjectId -> str, datetime -> ISO)."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_doc(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_doc(item) for item in value]
    return value


def user_summary(user):
    if not user:
        return None
    return {"_id": str(user["_id"]), "fullName": user.get("fullName")}


def strip_answers(quiz):
    quiz = dict(quiz)
    quiz["questions"] = [
        {key: value for key, value in question.items() if key != "correctAnswer"}
        for question in quiz.get("questions", [])
    ]
    return quiz
