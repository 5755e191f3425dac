from flask import Blueprint, jsonify
import logging
from smms.database import quizzes_collection, results_collection, users_collection
from smms.routes.auth.guards import teacher_required
from smms.utils.serializers import serialize_doc

logger = logging.getLogger(__name__)

router = Blueprint("faculty_view", __name__, url_prefix="/api")


def build_progress(results, students, quizzes):
    """Group results per student.

    ``students`` and ``quizzes`` map ObjectId -> document. Results whose student
    record no longer exists are skipped.
    """
    progress = {}
    for result in results:
        student = students.get(result["student"])
        if not student:
            continue

        entry = progress.setdefault(result["student"], {
            "studentId": str(result["student"]),
            "fullName": student.get("fullName"),
            "totalQuizzes": 0,
            "completedQuizzes": [],
        })
        quiz = quizzes.get(result["quiz"])
        entry["completedQuizzes"].append({
            "quizId": str(result["quiz"]),
            "quizTitle": quiz["title"] if quiz else "Deleted quiz",
            "score": result["score"],
            "total": result["totalQuestions"],
            "date": result.get("date"),
        })
        entry["totalQuizzes"] += 1

    return sorted(progress.values(), key=lambda s: (s["fullName"] or "").lower())


@router.route("/results/students", methods=["GET"])
@teacher_required
def get_student_progress():
    try:
        results = list(results_collection().find().sort("date", -1))

        student_ids = list({r["student"] for r in results})
        quiz_ids = list({r["quiz"] for r in results})
        students = {
            u["_id"]: u
            for u in users_collection().find({"_id": {"$in": student_ids}, "role": "student"}, {"fullName": 1})
        }
        quizzes = {q["_id"]: q for q in quizzes_collection().find({"_id": {"$in": quiz_ids}}, {"title": 1})}

        progress = build_progress(results, students, quizzes)
        return jsonify({"success": True, "progress": serialize_doc(progress)}), 200

    except Exception as e:
        logger.error(f"Error generating student progress: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error fetching student progress."}), 500
