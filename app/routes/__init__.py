"""Route blueprints package for API endpoints.

Blueprints for entries, topics and AI suggestions. Each route builds its
service from the collaborators the app factory stored on
``app.extensions["diary"]`` and lets ``DiaryError`` propagate to the
error handlers registered in ``create_app``.
"""

from __future__ import annotations

from typing import Any, Dict

from flask import current_app


def collaborators() -> Dict[str, Any]:
    return current_app.extensions["diary"]
