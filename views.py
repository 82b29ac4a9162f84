import io

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, send_file, url_for

from favorites import read_favorites, toggle_favorite, write_favorites
from filters import OPEN_FILTERS, FilterError, FilterState, filter_stores
from hours import CURRENT_DAY, resolve_day
from query import get_days, get_store_names, get_stores
from table import build_rows, headers, parse_sorting, sort_rows, sorting_args, to_csv

stores: Blueprint = Blueprint("stores", __name__)


@stores.app_errorhandler(FilterError)
def bad_filter(error):
    current_app.logger.warning("Rejected filter: %s", error)
    return jsonify({"error": str(error)}), 400


def link_args(state, sorting):
    return {**state.to_args(), **sorting_args(sorting)}


def table_state():
    state = FilterState.from_args(request.args)
    sorting = parse_sorting(request.args)
    now = current_app.config["CLOCK"]()
    favorites = read_favorites(request)
    day = resolve_day(state.day, now)

    rows = filter_stores(get_stores(), state, now, favorites)
    rows = sort_rows(rows, day, sorting)
    return {
        "state": state,
        "sorting": sorting,
        "day": day,
        "rows": build_rows(rows, day, now, favorites),
    }


@stores.route("/", methods=["GET"])
def index():
    table = table_state()
    return render_template(
        "index.html",
        days=[CURRENT_DAY] + get_days(),
        open_filters=OPEN_FILTERS,
        headers=headers(table["sorting"]),
        sorting_args=sorting_args,
        link_args=link_args,
        **table,
    )


@stores.route("/api/stores", methods=["GET"])
def api_stores():
    table = table_state()
    return jsonify(
        {
            "day": table["day"],
            "sorting": sorting_args(table["sorting"]) or None,
            "stores": table["rows"],
        }
    )


@stores.route("/export.csv", methods=["GET"])
def export_csv():
    # same rows the table shows, sent as a download
    table = table_state()
    data = io.BytesIO(to_csv(table["rows"]).encode("utf-8"))
    return send_file(data, mimetype="text/csv", as_attachment=True, download_name="stores.csv")


@stores.route("/favorites/<path:name>", methods=["POST"])
def favorite(name):
    if name not in get_store_names():
        return jsonify({"error": "Store not found"}), 404
    state = FilterState.from_args(request.args)
    sorting = parse_sorting(request.args)
    favorites = toggle_favorite(read_favorites(request), name)
    current_app.logger.info("Favorites now %d stores (toggled %s)", len(favorites), name)
    response = redirect(url_for("stores.index", **link_args(state, sorting)))
    return write_favorites(response, favorites)
