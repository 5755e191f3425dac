from flask import Blueprint, request, jsonify
from flask_login import current_user
from bson import ObjectId
from datetime import datetime, timezone
from pydantic import ValidationError
import logging
from smms.database import quizzes_collection, subjects_collection, users_collection
from smms.models import QuizCreate, validation_message
from smms.routes.auth.guards import login_required, teacher_required
from smms.utils.serializers import parse_object_id, serialize_doc, strip_answers, user_summary

logger = logging.getLogger(__name__)

router = Blueprint("quizzes", __name__, url_prefix="/api")


def quiz_for_viewer(quiz):
    # Students never see the answer key
    if current_user.is_student:
        quiz = strip_answers(quiz)
    return serialize_doc(quiz)


@router.route("/quizzes/subject/<subject_id>", methods=["GET"])
@login_required
def get_quizzes_by_subject(subject_id):
    try:
        subject = parse_object_id(subject_id)
        if subject is None:
            return jsonify({"success": False, "message": "Invalid subject id."}), 400

        quizzes = list(quizzes_collection().find({"subject": subject}).sort("createdAt", -1))

        teacher_ids = list({q["teacher"] for q in quizzes})
        teachers = {
            u["_id"]: u for u in users_collection().find({"_id": {"$in": teacher_ids}}, {"fullName": 1})
        }
        for quiz in quizzes:
            quiz["teacher"] = user_summary(teachers.get(quiz["teacher"]))

        return jsonify({"success": True, "quizzes": [quiz_for_viewer(q) for q in quizzes]}), 200

    except Exception as e:
        logger.error(f"Error fetching quizzes by subject: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server failed to retrieve quizzes."}), 500


@router.route("/quizzes/<quiz_id>", methods=["GET"])
@login_required
def get_quiz(quiz_id):
    try:
        object_id = parse_object_id(quiz_id)
        if object_id is None:
            return jsonify({"success": False, "message": "Invalid quiz id."}), 400

        quiz = quizzes_collection().find_one({"_id": object_id})
        if not quiz:
            return jsonify({"success": False, "message": "Quiz not found."}), 404

        return jsonify({"success": True, "quiz": quiz_for_viewer(quiz)}), 200

    except Exception as e:
        logger.error(f"Error fetching single quiz: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error loading quiz details."}), 500


@router.route("/quizzes", methods=["POST"])
@teacher_required
def create_quiz():
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Request body must be a JSON object."}), 400
        if not data.get("title") or not data.get("subjectId") or not data.get("questions"):
            return jsonify({
                "success": False,
                "message": "Quiz title, subject, and at least one question are required.",
            }), 400

        try:
            quiz = QuizCreate.model_validate(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": validation_message(e)}), 400

        subject = parse_object_id(quiz.subject_id)
        if subject is None:
            return jsonify({"success": False, "message": "Invalid subject id."}), 400
        if not subjects_collection().find_one({"_id": subject}):
            return jsonify({"success": False, "message": "Subject not found."}), 404

        result = quizzes_collection().insert_one({
            "title": quiz.title,
            "subject": subject,
            "teacher": current_user.object_id,
            "questions": [q.to_document(ObjectId()) for q in quiz.questions],
            "createdAt": datetime.now(timezone.utc),
        })
        logger.info("Quiz %s created by %s", result.inserted_id, current_user.email)

        return jsonify({
            "success": True,
            "message": "Quiz created successfully!",
            "quizId": str(result.inserted_id),
        }), 201

    except Exception as e:
        logger.error(f"Error creating quiz: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error creating quiz."}), 500
