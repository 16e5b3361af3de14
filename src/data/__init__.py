"""Data module for static reference tables."""

from src.data.dietary_preferences import DIETARY_PREFERENCES
from src.data.ingredient_vocabulary import (
    INGREDIENT_SET,
    INGREDIENT_VOCABULARY,
    MEASUREMENTS,
    STOPWORDS,
    UNIT_ABBREVIATIONS,
)

__all__ = [
    "DIETARY_PREFERENCES",
    "INGREDIENT_SET",
    "INGREDIENT_VOCABULARY",
    "MEASUREMENTS",
    "STOPWORDS",
    "UNIT_ABBREVIATIONS",
]
