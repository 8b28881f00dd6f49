"""Tests for table name resolution."""

import pytest

from tabledoc.models import Customer
from tabledoc.store.naming import pluralize, table_name_for


class Category:
    pass


class Box:
    pass


class Person:
    pass


class OrderItem:
    pass


class Shelf:
    pass


class SalesAnalysis:
    pass


class Hero:
    pass


@pytest.mark.parametrize(
    "word,expected",
    [
        ("customer", "customers"),
        ("category", "categories"),
        ("day", "days"),
        ("box", "boxes"),
        ("church", "churches"),
        ("knife", "knives"),
        ("person", "people"),
        ("Person", "People"),
        ("series", "series"),
    ],
)
def test_pluralize(word: str, expected: str):
    """pluralize should handle common English inflections."""
    assert pluralize(word) == expected


@pytest.mark.parametrize(
    "word,expected",
    [
        ("Analysis", "Analyses"),
        ("Index", "Indices"),
        ("Quiz", "Quizzes"),
        ("Hero", "Heroes"),
        ("Matrix", "Matrices"),
        ("Potato", "Potatoes"),
        ("Photo", "Photos"),
        ("Status", "Statuses"),
    ],
)
def test_pluralize_irregular_endings(word: str, expected: str):
    """Latin and -o endings take their dictionary plural."""
    assert pluralize(word) == expected


@pytest.mark.parametrize(
    "entity_type,expected",
    [
        (Customer, "customers"),
        (Category, "categories"),
        (Box, "boxes"),
        (Person, "people"),
        (OrderItem, "orderitems"),
        (Shelf, "shelves"),
        (SalesAnalysis, "salesanalyses"),
        (Hero, "heroes"),
    ],
)
def test_table_name_for(entity_type: type, expected: str):
    """Table names are the lower-cased plural of the type name."""
    assert table_name_for(entity_type) == expected
