"""Movies encoded as JSON, and titles decoded from it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_HTML_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


@dataclass
class Movie:
    """A film with its release year, colour flag and actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def _as_json(self) -> dict[str, Any]:
        record: dict[str, Any] = {"Title": self.title, "released": self.year}
        if self.color:
            record["color"] = True
        record["Actors"] = list(self.actors)
        return record


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def to_json(movies: list[Movie], indent: str | int | None = None) -> str:
    """Encode movies as JSON; compact unless ``indent`` is given."""
    records = [m._as_json() for m in movies]
    if indent is None:
        text = json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(records, ensure_ascii=False, indent=indent, separators=(",", ": "))
    return text.translate(_HTML_ESCAPES)


def titles_from_json(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return each one's title.

    Keys are matched to "Title" without regard to case; a missing title is empty.
    """
    records = json.loads(data)
    if not isinstance(records, list):
        raise ValueError("json: cannot unmarshal non-array into list of titles")
    titles = []
    for record in records:
        title = ""
        if record is not None:
            if not isinstance(record, dict):
                raise ValueError("json: cannot unmarshal non-object into title record")
            for key, value in record.items():
                if key.casefold() != "title" or value is None:
                    continue
                if not isinstance(value, str):
                    raise ValueError("json: cannot unmarshal non-string into field Title")
                title = value
        titles.append(title)
    return titles


def main(argv: list[str] | None = None) -> int:
    """Print the movie list compactly, indented, and as titles."""
    print(to_json(MOVIES))
    data = to_json(MOVIES, indent="    ")
    print(data)
    titles = titles_from_json(data)
    print("[" + " ".join("{" + t + "}" for t in titles) + "]")
    return 0