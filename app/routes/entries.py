"""Entries routes: /api/entries, /api/entries/topic/<topic_id>, /api/entries/<entry_id>

GET  /api/entries?userId=&topicId=        -> { entries, totalEntries }
POST /api/entries {userId, topicId, title, content} -> 201 { entry }
GET  /api/entries/topic/<topic_id>?userId= -> { entries, totalEntries }
GET  /api/entries/<entry_id>?userId=      -> { entry }
"""

from __future__ import annotations

from typing import Any, Dict, List

from flask import Blueprint, jsonify, request

from app.errors import ValidationError
from app.routes import collaborators
from app.schemas import Entry
from app.services.entry_service import EntryService

entries_bp = Blueprint("entries", __name__, url_prefix="/api/entries")


def _service() -> EntryService:
    return EntryService(collaborators()["store"])


def _entries_response(entries: List[Entry]):
    return jsonify({"entries": [e.to_json() for e in entries], "totalEntries": len(entries)})


@entries_bp.get("")
def list_entries():
    entries = _service().list_entries(request.args.get("userId"), request.args.get("topicId"))
    return _entries_response(entries)


@entries_bp.post("")
def create_entry():
    payload: Dict[str, Any] = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        raise ValidationError("Missing required fields")
    entry = _service().create_entry(
        payload.get("userId"),
        payload.get("topicId"),
        payload.get("title"),
        payload.get("content"),
    )
    return jsonify({"entry": entry.to_json()}), 201


@entries_bp.get("/topic/<topic_id>")
def list_topic_entries(topic_id: str):
    entries = _service().list_topic_entries(request.args.get("userId"), topic_id)
    return _entries_response(entries)


@entries_bp.get("/<entry_id>")
def get_entry(entry_id: str):
    entry = _service().get_entry(request.args.get("userId"), entry_id)
    return jsonify({"entry": entry.to_json()})
