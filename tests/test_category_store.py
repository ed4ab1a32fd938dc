"""Tests for the category store."""

from datetime import date

import pytest

from expensebook.domain.defaults import DEFAULT_CATEGORIES, default_categories
from expensebook.domain.state import AppState
from helpers import make_expense


@pytest.fixture
def seeded_state():
    """State with default categories, a custom category and some expenses."""
    state = AppState(categories=default_categories())
    state.categories.add_category("Pets")
    state.categories.add_subcategory("Pets", "Vet")
    state.expenses.add_expense(make_expense("p1", date(2024, 1, 1), category="Pets"))
    state.expenses.add_expense(make_expense("f1", date(2024, 1, 2), category="Food"))
    state.expenses.add_expense(make_expense("p2", date(2024, 1, 3), category="Pets"))
    return state


def test_defaults_seeded_in_order():
    """Test the seeded default taxonomy."""
    categories = default_categories()

    assert [c.name for c in categories] == [name for name, _ in DEFAULT_CATEGORIES]
    assert all(c.is_default for c in categories)
    food = categories[0]
    assert food.subcategories[:2] == ("Groceries", "Dining Out")


def test_add_category():
    """Test adding a user-defined category."""
    state = AppState(categories=default_categories())

    assert state.categories.add_category("Pets") is True

    pets = state.categories.get_category("Pets")
    assert pets.is_default is False
    assert pets.subcategories == ()
    assert state.categories.list_categories()[-1] is pets


def test_add_category_duplicate_or_empty_is_noop():
    """Test that duplicates and empty names are ignored."""
    state = AppState(categories=default_categories())
    before = state.categories.list_categories()

    assert state.categories.add_category("Food") is False
    assert state.categories.add_category("") is False
    assert state.categories.list_categories() == before


def test_add_category_is_case_sensitive():
    """Test that lookups match names exactly."""
    state = AppState(categories=default_categories())

    assert state.categories.add_category("food") is True
    assert state.categories.get_category("food") is not None


def test_remove_default_category_is_noop(seeded_state):
    """Test that default categories survive removal attempts."""
    categories_before = seeded_state.categories.list_categories()
    expenses_before = seeded_state.expenses.list_expenses()

    for name, _ in DEFAULT_CATEGORIES:
        assert seeded_state.categories.remove_category(name) is False

    assert seeded_state.categories.list_categories() == categories_before
    assert seeded_state.expenses.list_expenses() == expenses_before


def test_remove_category_cascades_to_expenses(seeded_state):
    """Test that removing a category deletes its expenses in one change."""
    changes = []
    seeded_state.subscribe(lambda s: changes.append(1))

    assert seeded_state.categories.remove_category("Pets") is True

    assert seeded_state.categories.get_category("Pets") is None
    assert [e.id for e in seeded_state.expenses.list_expenses()] == ["f1"]
    assert changes == [1]


def test_remove_missing_category_is_noop(seeded_state):
    """Test removing an unknown category."""
    assert seeded_state.categories.remove_category("Nope") is False
    assert len(seeded_state.expenses) == 3


def test_add_subcategory_appends_without_dedup():
    """Test subcategory appends keep order and allow duplicates."""
    state = AppState(categories=default_categories())

    state.categories.add_subcategory("Food", "Snacks")
    state.categories.add_subcategory("Food", "Snacks")

    subs = state.categories.get_category("Food").subcategories
    assert subs[-2:] == ("Snacks", "Snacks")


def test_add_subcategory_to_missing_category():
    """Test that adding to an unknown category is ignored."""
    state = AppState(categories=default_categories())

    assert state.categories.add_subcategory("Nope", "Thing") is False


def test_remove_subcategory_removes_all_matches():
    """Test that every matching subcategory entry is removed."""
    state = AppState(categories=default_categories())
    state.categories.add_category("Pets")
    for sub in ("Vet", "Food", "Vet"):
        state.categories.add_subcategory("Pets", sub)

    assert state.categories.remove_subcategory("Pets", "Vet") is True
    assert state.categories.get_category("Pets").subcategories == ("Food",)
    assert state.categories.remove_subcategory("Pets", "Vet") is False


def test_entities_are_replaced_not_mutated():
    """Test that earlier category snapshots do not change."""
    state = AppState(categories=default_categories())
    snapshot = state.categories.get_category("Food")

    state.categories.add_subcategory("Food", "Snacks")

    assert "Snacks" not in snapshot.subcategories
    assert "Snacks" in state.categories.get_category("Food").subcategories


def test_protected_subcategories():
    """Test that only seeded subcategories of default categories are protected."""
    state = AppState(categories=default_categories())
    state.categories.add_subcategory("Food", "Snacks")
    state.categories.add_category("Pets")
    state.categories.add_subcategory("Pets", "Groceries")

    assert state.categories.is_protected_subcategory("Food", "Groceries") is True
    assert state.categories.is_protected_subcategory("Food", "Snacks") is False
    assert state.categories.is_protected_subcategory("Pets", "Groceries") is False
    assert state.categories.is_protected_subcategory("Nope", "Groceries") is False
