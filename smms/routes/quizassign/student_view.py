from flask import Blueprint, jsonify
from flask_login import current_user
import logging
from smms.database import quizzes_collection, results_collection
from smms.routes.auth.guards import student_required
from smms.utils.serializers import serialize_doc

logger = logging.getLogger(__name__)

router = Blueprint("student_view", __name__, url_prefix="/api")


@router.route("/results/me", methods=["GET"])
@student_required
def student_history():
    try:
        results = list(results_collection().find({"student": current_user.object_id}).sort("date", -1))
        titles = {
            q["_id"]: q["title"]
            for q in quizzes_collection().find({"_id": {"$in": [r["quiz"] for r in results]}}, {"title": 1})
        }
        for result in results:
            result["quizTitle"] = titles.get(result["quiz"], "Deleted quiz")
        return jsonify({"success": True, "results": serialize_doc(results)}), 200
    except Exception as e:
        logger.error(f"Error fetching results for {current_user.email}: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error fetching results."}), 500
