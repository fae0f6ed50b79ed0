# -----------------------------------------------------------------------------
# greetgen/rules/occasions.py — Keyword occasion matching and canned templates
# -----------------------------------------------------------------------------
# Groups are checked in order; the first group with a matching keyword wins.
# Templates keep the literal {name} placeholder for the caller to fill in.
# -----------------------------------------------------------------------------

from typing import Literal

Occasion = Literal["diwali", "christmas", "newyear", "birthday", "message"]

OCCASION_KEYWORDS: list[tuple[Occasion, tuple[str, ...]]] = [
    ("diwali", ("diwali", "deepavali")),
    ("christmas", ("christmas",)),
    ("newyear", ("new year", "newyear")),
    ("birthday", ("birthday",)),
]

TEMPLATES: dict[str, str] = {
    "diwali": "Hello {name}, Diwali greetings! We wish you the best holiday. Namaste!",
    "christmas": "Hello {name}, Merry Christmas! Wishing you joy and peace this season.",
    "newyear": "Hello {name}, Happy New Year! Wishing you a prosperous year ahead.",
    "birthday": "Hello {name}, Happy Birthday! Hope you have a wonderful day filled with joy.",
    "message": "Hello {name}, Greetings! Here's a short message you can use.",
}


def classify_occasion(prompt: str | None) -> Occasion:
    text = (prompt or "").lower()
    for occasion, keywords in OCCASION_KEYWORDS:
        if any(k in text for k in keywords):
            return occasion
    return "message"


def template_for(occasion: str) -> str:
    return TEMPLATES.get(occasion, TEMPLATES["message"])


def generate_message_rule(prompt: str | None) -> str:
    return template_for(classify_occasion(prompt))
