import os
import time
import uuid
import logging
from datetime import datetime, timezone
from flask import Blueprint, request, jsonify, current_app, send_from_directory
from flask_login import current_user
from werkzeug.exceptions import HTTPException
from werkzeug.utils import secure_filename
from smms.database import materials_collection, subjects_collection, users_collection
from smms.routes.auth.guards import login_required, teacher_required
from smms.utils.serializers import parse_object_id, serialize_doc, user_summary

logger = logging.getLogger(__name__)

router = Blueprint("materials", __name__)


def upload_folder():
    return os.path.abspath(current_app.config["UPLOAD_FOLDER"])


def stored_filename(original_name):
    name = secure_filename(original_name) or "upload"
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{name}"


@router.route("/api/materials/subject/<subject_id>", methods=["GET"])
@login_required
def get_materials_by_subject(subject_id):
    try:
        subject = parse_object_id(subject_id)
        if subject is None:
            return jsonify({"success": False, "message": "Invalid subject id."}), 400

        materials = list(materials_collection().find({"subject": subject}).sort("uploadDate", -1))

        uploader_ids = list({m["uploadedBy"] for m in materials})
        uploaders = {
            u["_id"]: u for u in users_collection().find({"_id": {"$in": uploader_ids}}, {"fullName": 1})
        }
        for material in materials:
            material["uploadedBy"] = user_summary(uploaders.get(material["uploadedBy"]))

        return jsonify({"success": True, "materials": serialize_doc(materials)}), 200

    except Exception as e:
        logger.error(f"Material fetch error: {str(e)}", exc_info=True)
        return jsonify({"success": False, "message": "Server failed to fetch materials from DB."}), 500


@router.route("/api/materials/upload", methods=["POST"])
@teacher_required
def upload_material():
    saved_path = None
    try:
        file = request.files.get("file")
        title = (request.form.get("title") or "").strip()
        subject_id = request.form.get("subjectId")

        if not file or not file.filename:
            return jsonify({"success": False, "message": "No file uploaded."}), 400
        if not title or not subject_id:
            return jsonify({"success": False, "message": "Title and Subject are required."}), 400

        subject = parse_object_id(subject_id)
        if subject is None:
            return jsonify({"success": False, "message": "Invalid subject id."}), 400
        if not subjects_collection().find_one({"_id": subject}):
            return jsonify({"success": False, "message": "Subject not found."}), 404

        folder = upload_folder()
        os.makedirs(folder, exist_ok=True)
        filename = stored_filename(file.filename)
        saved_path = os.path.join(folder, filename)
        file.save(saved_path)

        result = materials_collection().insert_one({
            "title": title,
            "file": "/uploads/" + filename,
            "subject": subject,
            "uploadedBy": current_user.object_id,
            "uploadDate": datetime.now(timezone.utc),
        })
        logger.info("Material %s uploaded by %s", filename, current_user.email)

        return jsonify({
            "success": True,
            "message": "Material uploaded successfully!",
            "materialId": str(result.inserted_id),
        }), 201

    except HTTPException:
        # e.g. RequestEntityTooLarge, rendered by the app error handler
        raise
    except Exception as e:
        logger.error(f"Error uploading material: {str(e)}", exc_info=True)
        if saved_path and os.path.exists(saved_path):
            os.remove(saved_path)
        return jsonify({"success": False, "message": "Server error during material upload."}), 500


@router.route("/uploads/<path:filename>", methods=["GET"])
def serve_upload(filename):
    return send_from_directory(upload_folder(), filename)
