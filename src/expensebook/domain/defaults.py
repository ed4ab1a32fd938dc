"""Default category taxonomy seeded on first run."""

from expensebook.domain.entities import Category


DEFAULT_CATEGORIES = [
    ("Food", ["Groceries", "Dining Out", "Fruits", "Vegetables", "Beverages"]),
    (
        "Housing",
        ["Rent", "Home Maintenance", "Furniture", "Household Supplies", "Dishes", "Miscellaneous"],
    ),
    ("Utilities", ["Electricity", "Water", "Gas", "Internet"]),
    ("Transportation", ["Car Rental", "Bus Ticket", "Flight Ticket", "Taxi"]),
    ("Health", ["Medicine", "Hospital", "Dental", "Eye Care", "Medical Supplies"]),
    ("Education", ["School Fees", "University Fees", "Books", "Stationery", "Courses"]),
    ("Leisure", ["Travel", "Entertainment", "Sports Equipment", "Gym Membership", "Games"]),
    ("Family and Social Obligations", ["Family Expenses", "Relative Expenses"]),
    ("Personal Care", ["Beauty Salon", "Hygiene Products", "Beauty Products", "Barber"]),
    ("Debt", ["Loan Payment"]),
    ("Special Occasions", ["Birthday Gifts", "Wedding Gifts", "Visitation Gifts", "Celebrations"]),
    ("Charity and Donations", ["Charity", "Helping the Needy", "Community Center"]),
]

_DEFAULT_SUBCATEGORIES = {name: frozenset(subs) for name, subs in DEFAULT_CATEGORIES}


def default_categories() -> list[Category]:
    """Build fresh default category entities in seed order."""
    return [
        Category(name=name, is_default=True, subcategories=tuple(subs))
        for name, subs in DEFAULT_CATEGORIES
    ]


def is_default_subcategory(category_name: str, subcategory: str) -> bool:
    """Return True if the subcategory belongs to the seeded set of its category."""
    return subcategory in _DEFAULT_SUBCATEGORIES.get(category_name, ())
