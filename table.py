import pandas as pd

from filters import FilterError, is_favorite
from hours import closing_minutes, format_hours, is_open

COLUMNS = {"name": "Store Name", "hours": "Hours"}
SORT_ASC = "asc"
SORT_DESC = "desc"
SORT_INDICATORS = {SORT_ASC: " 🔼", SORT_DESC: " 🔽"}

CSV_COLUMNS = {"name": "Store Name", "hours": "Hours", "open": "Open Now", "favorite": "Favorite"}


def parse_sorting(args):
    column = args.get("sort")
    if not column:
        return None
    order = args.get("order", SORT_ASC)
    if column not in COLUMNS:
        raise FilterError(f"Cannot sort by {column!r}")
    if order not in SORT_INDICATORS:
        raise FilterError(f"Unknown sort order {order!r}")
    return column, order


def sorting_args(sorting):
    if sorting is None:
        return {}
    return {"sort": sorting[0], "order": sorting[1]}


def next_sort_order(sorting, column):
    if sorting is None or sorting[0] != column:
        return SORT_ASC
    if sorting[1] == SORT_ASC:
        return SORT_DESC
    return None


def sort_title(sorting, column):
    order = next_sort_order(sorting, column)
    if order == SORT_ASC:
        return "Sort ascending"
    if order == SORT_DESC:
        return "Sort descending"
    return "Clear sort"


def sort_indicator(sorting, column):
    if sorting is None or sorting[0] != column:
        return ""
    return SORT_INDICATORS[sorting[1]]


def headers(sorting):
    result = []
    for column, label in COLUMNS.items():
        order = next_sort_order(sorting, column)
        result.append(
            {
                "id": column,
                "label": label,
                "indicator": sort_indicator(sorting, column),
                "title": sort_title(sorting, column),
                "next": (column, order) if order else None,
            }
        )
    return result


def sort_rows(stores, day, sorting):
    if sorting is None or not stores:
        return list(stores)
    column, order = sorting
    df = pd.DataFrame(
        {
            "position": range(len(stores)),
            "name": [store["name"].lower() for store in stores],
            "hours": [closing_minutes(store["hours"].get(day)) for store in stores],
        }
    )
    # stores without hours for the day have no closing time and sort last
    df["hours"] = df["hours"].astype(float)
    df = df.sort_values(by=column, ascending=order == SORT_ASC, kind="mergesort", na_position="last")
    return [stores[i] for i in df["position"]]


def build_rows(stores, day, now, favorites=frozenset()):
    rows = []
    for store in stores:
        hours = store["hours"].get(day)
        rows.append(
            {
                "name": store["name"],
                "hours": format_hours(hours),
                "open": is_open(hours, now),
                "favorite": is_favorite(store, favorites),
            }
        )
    return rows


def to_csv(rows):
    df = pd.DataFrame(rows, columns=list(CSV_COLUMNS))
    return df.rename(columns=CSV_COLUMNS).to_csv(index=False)
