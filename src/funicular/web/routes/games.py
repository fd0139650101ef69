from __future__ import annotations

from flask import Blueprint, abort, current_app, request

from funicular.catalog import views
from funicular.catalog.handler import state_from_args
from funicular.web.routes import render_page

games_bp = Blueprint("games", __name__)


@games_bp.route("/games", methods=["GET", "POST"])
def games():
    """List games; POST applies an add or remove first, then lists."""
    catalog = current_app.extensions["catalog"]

    if request.method == "POST":
        submit = request.form.get("submit", "")
        if submit == "add":
            catalog.add(
                request.form.get("name", "").strip(),
                request.form.get("description", "").strip(),
            )
        elif submit == "remove":
            slugs = request.form.getlist("slugs") + request.form.getlist("slugs[]")
            catalog.remove(slugs, all_flag=bool(request.form.get("slugs_all")))

    content, overlay = catalog.render(state_from_args(request.args))
    return render_page(content, overlay)


@games_bp.route("/games/<slug>")
def detail(slug: str):
    """Show a single game."""
    game = current_app.extensions["catalog"].get(slug)
    if game is None:
        abort(404)
    return render_page(views.detail(game))
