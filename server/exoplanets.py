import os
import time

from flask import Blueprint, current_app, jsonify, request

from config.settings import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from data.loader import load_exoplanets
from targets.lookup import lookup_planet
from utils.errors import ValidationError
from utils.json_utils import json_safe
from utils.pagination import (
    normalize_order,
    paginate,
    parse_int,
    search_records,
    sort_records,
)

bp = Blueprint("exoplanets", __name__)


def _csv_path() -> str:
    return current_app.config["DATA_CSV"]


@bp.route("/api/data", methods=["GET"])
def list_all():
    records = load_exoplanets(_csv_path(), with_ids=True)
    return jsonify(json_safe(records)), 200


@bp.route("/api/data/", methods=["GET"], defaults={"pl_name": ""})
@bp.route("/api/data/<path:pl_name>", methods=["GET"])
def get_planet(pl_name: str):
    if not pl_name.strip("/ "):
        raise ValidationError("Planet name is required")
    return jsonify(json_safe(lookup_planet(pl_name, _csv_path(), decode=False))), 200


@bp.route("/api/exoplanets", methods=["GET"])
def list_page():
    page = parse_int(request.args.get("page"), DEFAULT_PAGE)
    page_size = parse_int(request.args.get("pageSize"), DEFAULT_PAGE_SIZE)
    records = load_exoplanets(_csv_path())
    data, pagination = paginate(records, page, page_size)

    # search/sort act on the fetched page only; pagination metadata stays untouched
    query = request.args.get("search")
    sort_by = request.args.get("sortBy")
    if query:
        data = search_records(data, query)
    if sort_by:
        data = sort_records(data, sort_by, normalize_order(request.args.get("sortOrder")))

    return jsonify(json_safe({"data": data, "pagination": pagination.to_dict()}))


@bp.route("/health", methods=["GET"])
def health_check():
    path = _csv_path()
    return jsonify(json_safe({
        "status": "healthy",
        "timestamp": time.time(),
        "data_file": path,
        "data_file_present": os.path.exists(path),
        "ai_configured": current_app.extensions["gemini"].configured,
    }))
