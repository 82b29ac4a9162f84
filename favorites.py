import json

from flask import current_app


def read_favorites(request):
    raw = request.cookies.get(current_app.config["FAVORITES_COOKIE"])
    if not raw:
        return set()
    try:
        names = json.loads(raw)
    except json.JSONDecodeError:
        current_app.logger.warning("Ignoring malformed favorites cookie")
        return set()
    if not isinstance(names, list):
        return set()
    return {name for name in names if isinstance(name, str)}


def write_favorites(response, names):
    response.set_cookie(
        current_app.config["FAVORITES_COOKIE"],
        json.dumps(sorted(names)),
        max_age=current_app.config["FAVORITES_MAX_AGE"],
        samesite="Lax",
    )
    return response


def toggle_favorite(names, name):
    names = set(names)
    if name in names:
        names.discard(name)
    else:
        names.add(name)
    return names
