from __future__ import annotations

from flask import Blueprint, Response, current_app

assets_bp = Blueprint("assets", __name__)

CSS_MAX_AGE = 2592000  # 30 days


@assets_bp.route("/site.css")
def site_css():
    """Serve the stylesheet precomputed at startup."""
    return Response(
        current_app.extensions["site_css"],
        mimetype="text/css",
        headers={"Cache-Control": f"max-age={CSS_MAX_AGE}"},
    )
