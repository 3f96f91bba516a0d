import logging

from flask import Blueprint, current_app, jsonify, request

from utils.errors import ValidationError
from utils.prompts import image_description_prompt, image_prompts, summary_prompt

logger = logging.getLogger(__name__)

bp = Blueprint("ai", __name__)

CONTENT_TYPES = ("summary", "image")


@bp.route("/api/ai/generate-content", methods=["POST"])
def generate_content():
    body = request.get_json(silent=True) or {}
    planet_data = body.get("planetData") if isinstance(body, dict) else None
    if not planet_data or not isinstance(planet_data, dict):
        raise ValidationError("Planet data is required")
    content_type = body.get("contentType")
    if content_type not in CONTENT_TYPES:
        raise ValidationError("Invalid content type")

    client = current_app.extensions["gemini"]
    logger.info("Generating %s for %s", content_type, planet_data.get("pl_name"))
    if content_type == "summary":
        text = client.generate_text(summary_prompt(planet_data))
        return jsonify({"summary": text, "success": True})

    description = client.generate_text(image_description_prompt(planet_data))
    return jsonify({"imagePrompts": image_prompts(planet_data, description), "success": True})
