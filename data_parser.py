from typing import Any, Dict, Iterable, List
from models import SavedItem


def is_unarchived(raw: Dict[str, Any]) -> bool:
    """
    Pocket reports status as "0" (unread), "1" (archived) or "2" (deleted).
    Depending on the client the value arrives as a string or a number.
    """
    status = raw.get("status")
    if status is None or isinstance(status, bool):
        return False
    if isinstance(status, (int, float)):
        return status == 0
    try:
        return int(str(status).strip()) == 0
    except (ValueError, TypeError):
        return False


def parse_saved_item(raw: Dict[str, Any]) -> SavedItem:
    """
    Reduce a raw Pocket API item to its title and URL.
    Falls back to the user-supplied fields when Pocket could not resolve the page.
    """

    def first_str(*fields):
        for field in fields:
            val = raw.get(field)
            if val is not None and str(val) != "":
                return str(val)
        return ""

    return SavedItem(
        title=first_str("resolved_title", "given_title"),
        url=first_str("resolved_url", "given_url"),
    )


def extract_saved_items(items: Iterable[Dict[str, Any]]) -> List[SavedItem]:
    return [
        parse_saved_item(raw)
        for raw in items
        if isinstance(raw, dict) and is_unarchived(raw)
    ]
