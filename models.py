from dataclasses import dataclass


@dataclass(frozen=True)
class SavedItem:
    title: str = ""
    url: str = ""
