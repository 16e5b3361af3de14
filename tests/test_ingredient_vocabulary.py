"""Consistency checks for the static reference tables."""

from src.data.dietary_preferences import DIETARY_PREFERENCES
from src.data.ingredient_vocabulary import (
    INGREDIENT_SET,
    INGREDIENT_VOCABULARY,
    MEASUREMENTS,
    STOPWORDS,
    UNIT_ABBREVIATIONS,
)
from src.pipeline.ingredient_filter import normalize


def test_vocabulary_entries_are_normalized():
    assert [normalize(word) for word in INGREDIENT_VOCABULARY] == list(INGREDIENT_VOCABULARY)


def test_vocabulary_has_no_duplicates():
    assert len(INGREDIENT_SET) == len(INGREDIENT_VOCABULARY)


def test_stopwords_never_overlap_vocabulary():
    assert STOPWORDS.isdisjoint(INGREDIENT_SET)


def test_measurements_never_overlap_vocabulary():
    assert MEASUREMENTS.isdisjoint(INGREDIENT_SET)


def test_unit_abbreviations_are_measurements():
    assert set(UNIT_ABBREVIATIONS) <= MEASUREMENTS


def test_expected_members():
    assert {"rice", "chicken", "arborio", "corn", "all-purpose"} <= INGREDIENT_SET
    assert {"the", "dish", "served", "bowl"} <= STOPWORDS
    assert {"cup", "cups", "tbsp", "oz", "g", "l"} <= MEASUREMENTS


def test_dietary_preferences_are_unique():
    ids = [item["id"] for item in DIETARY_PREFERENCES]
    assert len(ids) == len(set(ids)) == 6
    assert "gluten-free" in ids
