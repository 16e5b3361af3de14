"""Dietary preference catalogue offered alongside ingredient extraction.

Each preference defines:
- id: Stable identifier used by clients
- label: Human-readable name
- value: The value clients send back when a preference is selected
"""

from typing import TypedDict


class DietaryPreferenceData(TypedDict):
    """Type definition for a dietary preference entry."""

    id: str
    label: str
    value: str


DIETARY_PREFERENCES: list[DietaryPreferenceData] = [
    {"id": "vegetarian", "label": "Vegetarian", "value": "vegetarian"},
    {"id": "vegan", "label": "Vegan", "value": "vegan"},
    {"id": "gluten-free", "label": "Gluten Free", "value": "gluten-free"},
    {"id": "dairy-free", "label": "Dairy Free", "value": "dairy-free"},
    {"id": "keto", "label": "Keto", "value": "keto"},
    {"id": "paleo", "label": "Paleo", "value": "paleo"},
]
