"""Output formatters for forecast cards."""

import json

from forecastwidget.models.display import DisplayCard


def format_cards_text(city_name: str, cards: list[DisplayCard]) -> str:
    """Plain text table for the terminal."""
    if not cards:
        return f"=== {city_name} ===\nNo forecast available"
    lines = [f"=== {city_name} ({len(cards)} days) ==="]
    for c in cards:
        marker = "*" if c.featured else " "
        lines.append(
            f"{marker} {c.date_label:<11} {c.day_icon} {c.night_icon}  "
            f"{c.condition_label:<14} H: {c.high_text:>6}  L: {c.low_text:>6}"
        )
    return "\n".join(lines)


def format_cards_json(city_name: str, cards: list[DisplayCard]) -> str:
    """JSON document for programmatic consumption."""
    data = {
        "city": city_name,
        "cards": [c.to_dict() for c in cards],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
