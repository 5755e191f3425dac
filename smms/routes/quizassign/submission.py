from flask import Blueprint, request, jsonify
from flask_login import current_user
from datetime import datetime, timezone
from pydantic import ValidationError
import logging
from smms.database import quizzes_collection, results_collection
from smms.models import QuizSubmission, validation_message
from smms.routes.auth.guards import student_required
from smms.utils.serializers import parse_object_id

logger = logging.getLogger(__name__)

router = Blueprint("submission", __name__, url_prefix="/api")


def score_answers(quiz, answers):
    """Count the questions whose chosen option equals the stored correct answer."""
    correct_count = 0
    details = []
    for question in quiz.get("questions", []):
        qid = str(question["_id"])
        chosen = answers.get(qid)
        correct = chosen is not None and chosen == question["correctAnswer"]
        if correct:
            correct_count += 1
        details.append({"questionId": qid, "correct": correct})
    return correct_count, details


@router.route("/quizzes/<quiz_id>/submit", methods=["POST"])
@student_required
def submit_quiz(quiz_id):
    try:
        object_id = parse_object_id(quiz_id)
        if object_id is None:
            return jsonify({"success": False, "message": "Invalid quiz id."}), 400

        try:
            submission = QuizSubmission.model_validate(request.get_json(silent=True) or {})
        except ValidationError as e:
            return jsonify({"success": False, "message": validation_message(e)}), 400

        quiz = quizzes_collection().find_one({"_id": object_id})
        if not quiz:
            return jsonify({"success": False, "message": "Quiz not found."}), 404

        score, details = score_answers(quiz, submission.answers)
        total_questions = len(quiz.get("questions", []))

        result = results_collection().insert_one({
            "student": current_user.object_id,
            "quiz": object_id,
            "score": score,
            "totalQuestions": total_questions,
            "date": datetime.now(timezone.utc),
        })
        logger.info("Quiz %s submitted by %s: %d/%d", quiz_id, current_user.email, score, total_questions)

        return jsonify({
            "success": True,
            "message": "Quiz submitted successfully!",
            "resultId": str(result.inserted_id),
            "score": score,
            "totalQuestions": total_questions,
            "details": details,
        }), 201

    except Exception as e:
        logger.error(f"Error submitting quiz: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error submitting quiz."}), 500
