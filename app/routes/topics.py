"""Topics routes: GET /api/topics, GET /api/topics/stats

Stats are recomputed on every request: one entry lookup per topic,
fanned out on a bounded thread pool.
"""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from app.routes import collaborators
from app.services.topic_service import TopicService

topics_bp = Blueprint("topics", __name__, url_prefix="/api/topics")


def _service() -> TopicService:
    c = collaborators()
    return TopicService(c["store"], c["store"], max_workers=c["stats_max_workers"])


@topics_bp.get("")
def list_topics():
    topics = _service().list_topics(request.args.get("userId"))
    return jsonify({"topics": [t.to_json() for t in topics]})


@topics_bp.get("/stats")
def topic_stats():
    svc = _service()
    stats = svc.get_topic_stats(request.args.get("userId"))
    return jsonify({
        "topicStats": [s.to_json() for s in stats],
        "overallStats": svc.summarize(stats),
    })
