from flask import Blueprint, jsonify
import logging
from smms.database import subjects_collection
from smms.utils.serializers import serialize_doc

logger = logging.getLogger(__name__)

router = Blueprint("subjects", __name__, url_prefix="/api")


@router.route("/subjects", methods=["GET"])
def get_subjects():
    try:
        subjects = list(subjects_collection().find().sort("name", 1))
        return jsonify({"success": True, "subjects": serialize_doc(subjects)}), 200
    except Exception as e:
        logger.error(f"Error fetching subjects: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server error fetching subjects."}), 500
