from __future__ import annotations

from dataclasses import asdict
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from pulsecheck.adapters.json_adapter import response_from_dict, survey_from_dict
from pulsecheck.analytics.insights import analyze_trends
from pulsecheck.analytics.report import analytics_to_dict, analyze_survey
from pulsecheck.analytics.scoring import (
    calculate_likert_score,
    calculate_nps,
    calculate_response_rate,
    get_category_status,
)
from pulsecheck.model.results import NOT_APPLICABLE, CategoryScore, CategoryStatus

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _json_body() -> dict[str, Any] | None:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _scores_from_body():
    data = _json_body()
    if data is None or not isinstance(data.get("scores"), list):
        return None
    return data["scores"]


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok"})


@api_bp.route("/nps", methods=["POST"])
def nps():
    """NPS for a list of 0-10 scores."""
    scores = _scores_from_body()
    if scores is None:
        return jsonify({"error": "scores list required"}), 400
    return jsonify(asdict(calculate_nps(scores)))


@api_bp.route("/likert", methods=["POST"])
def likert():
    """Likert favorability for a list of 1-5 scores."""
    scores = _scores_from_body()
    if scores is None:
        return jsonify({"error": "scores list required"}), 400
    return jsonify(asdict(calculate_likert_score(scores)))


@api_bp.route("/response-rate", methods=["POST"])
def response_rate():
    data = _json_body()
    if data is None or "total_employees" not in data or "total_responses" not in data:
        return jsonify({"error": "total_employees and total_responses required"}), 400
    result = calculate_response_rate(data["total_employees"], data["total_responses"])
    return jsonify(asdict(result))


@api_bp.route("/surveys/analytics", methods=["POST"])
def survey_analytics():
    """Full analytics for a survey export posted as JSON."""
    data = _json_body()
    if data is None or "survey" not in data:
        return jsonify({"error": "survey required"}), 400
    responses_raw = data.get("responses", [])
    if not isinstance(responses_raw, list):
        return jsonify({"error": "responses must be a list"}), 400

    survey = survey_from_dict(data["survey"])
    responses = [response_from_dict(r, survey) for r in responses_raw]
    analytics = analyze_survey(
        survey,
        responses,
        total_employees=data.get("total_employees"),
        config=current_app.extensions["pulsecheck_config"],
    )
    return jsonify(analytics_to_dict(analytics))


def _category_scores(raw: Any) -> dict[str, CategoryScore] | None:
    if not isinstance(raw, dict):
        return None
    scores: dict[str, CategoryScore] = {}
    for name, value in raw.items():
        score = value.get("score") if isinstance(value, dict) else value
        if isinstance(score, bool) or not isinstance(score, int):
            return None
        status = CategoryStatus.GOOD if score == NOT_APPLICABLE else get_category_status(score)
        scores[name] = CategoryScore(score=score, status=status)
    return scores


@api_bp.route("/trends", methods=["POST"])
def trends():
    """Compare two periods of category scores."""
    data = _json_body()
    if data is None:
        return jsonify({"error": "current and previous required"}), 400
    current = _category_scores(data.get("current"))
    previous = _category_scores(data.get("previous"))
    if current is None or previous is None:
        return jsonify({"error": "current and previous must map category to integer score"}), 400

    config = current_app.extensions["pulsecheck_config"]
    tolerance = data.get("tolerance", config.trend_tolerance)
    if isinstance(tolerance, bool) or not isinstance(tolerance, int) or tolerance < 0:
        return jsonify({"error": "tolerance must be a non-negative integer"}), 400

    report = analyze_trends(current, previous, tolerance=tolerance)
    return jsonify({
        bucket: [dict(asdict(t), delta=t.delta) for t in getattr(report, bucket)]
        for bucket in ("improvements", "declines", "stable")
    })
