from dataclasses import dataclass

from hours import CURRENT_DAY, DAY_NAMES, is_open, resolve_day

OPEN_ALL = "All"
OPEN_NOW = "Open Now"
OPEN_FILTERS = {OPEN_ALL: "All Stores", OPEN_NOW: "Open Now"}

_TRUTHY = {"1", "true", "on", "yes"}


class FilterError(ValueError):
    pass


@dataclass(frozen=True)
class FilterState:
    search: str = ""
    day: str = CURRENT_DAY
    open_filter: str = OPEN_ALL
    favorites_only: bool = False

    @classmethod
    def from_args(cls, args):
        state = cls(
            search=args.get("search", ""),
            day=args.get("day", CURRENT_DAY) or CURRENT_DAY,
            open_filter=args.get("open", OPEN_ALL) or OPEN_ALL,
            favorites_only=args.get("favorites", "").lower() in _TRUTHY,
        )
        state.validate()
        return state

    def validate(self):
        if self.day != CURRENT_DAY and self.day not in DAY_NAMES:
            raise FilterError(f"Unknown day {self.day!r}")
        if self.open_filter not in OPEN_FILTERS:
            raise FilterError(f"Unknown open filter {self.open_filter!r}")

    def to_args(self):
        args = {}
        if self.search:
            args["search"] = self.search
        if self.day != CURRENT_DAY:
            args["day"] = self.day
        if self.open_filter != OPEN_ALL:
            args["open"] = self.open_filter
        if self.favorites_only:
            args["favorites"] = "1"
        return args


def matches_search(store, search):
    return not search or search.lower() in store["name"].lower()


def is_open_now(store, day, now):
    return is_open(store["hours"].get(day), now)


def is_favorite(store, favorites):
    return store["name"] in favorites


def filter_stores(stores, state, now, favorites=frozenset()):
    # The selected day's hours are checked against the current clock time
    day = resolve_day(state.day, now)
    result = []
    for store in stores:
        if not matches_search(store, state.search):
            continue
        if state.open_filter == OPEN_NOW and not is_open_now(store, day, now):
            continue
        if state.favorites_only and not is_favorite(store, favorites):
            continue
        result.append(store)
    return result
