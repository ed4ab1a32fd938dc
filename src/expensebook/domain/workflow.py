"""Expense entry form workflow.

Holds the in-progress draft rows, lets the user pick or create categories
for them, and saves them: each row goes to the remote sink first and is
committed to the expense store only when the sink accepted it.
"""

import re
import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from expensebook.domain.entities import Category, Expense
from expensebook.domain.errors import (
    ProtectedEntryError,
    SinkError,
    SinkNotConfiguredError,
    SinkTransportError,
    ValidationError,
    default_category_protected,
    default_subcategory_protected,
    invalid_category_name,
    invalid_subcategory_name,
    sink_failed,
    sink_not_configured,
)
from expensebook.domain.state import AppState
from expensebook.logger import get_logger
from expensebook.sink import RemoteSink, SinkFailureReason, SinkResult
from expensebook.utils.currency import digits_only, format_currency

logger = get_logger()

NAME_PATTERN = re.compile(r"^[A-Za-z0-9 -]+$")
MIN_CATEGORY_LENGTH = 3
MIN_SUBCATEGORY_LENGTH = 2

Confirm = Callable[[str], bool]


def validate_category_name(name: str) -> str:
    """Check a new category name.

    Raises:
        ValidationError: If shorter than 3 characters or using other
            characters than letters, digits, spaces and hyphens
    """
    if len(name) < MIN_CATEGORY_LENGTH or not NAME_PATTERN.match(name):
        raise ValidationError(invalid_category_name(name))
    return name


def validate_subcategory_name(name: str) -> str:
    """Check a new subcategory name (at least 2 characters)."""
    if len(name) < MIN_SUBCATEGORY_LENGTH or not NAME_PATTERN.match(name):
        raise ValidationError(invalid_subcategory_name(name))
    return name


@dataclass
class DraftRow:
    """An in-progress, uncommitted expense entry."""

    date: date = field(default_factory=date.today)
    category: str = ""
    subcategory: str = ""
    description: str = ""
    quantity: int = 1
    unit_price: int = 0
    recipient: str = ""

    @property
    def total(self) -> int:
        return self.quantity * self.unit_price

    @property
    def formatted_total(self) -> str:
        return format_currency(self.total)


@dataclass(frozen=True)
class RowOutcome:
    """Result of saving one draft row."""

    index: int
    draft: DraftRow
    expense: Optional[Expense] = None
    error: Optional[SinkError] = None

    @property
    def committed(self) -> bool:
        return self.expense is not None


def _confirmed(confirm: Optional[Confirm], question: str) -> bool:
    return True if confirm is None else bool(confirm(question))


class EntryForm:
    """Drives one or more draft rows through validation and saving."""

    def __init__(
        self,
        state: AppState,
        sink: RemoteSink,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize entry form with a single default row.

        Args:
            state: Application state holding the category and expense stores
            sink: Remote sink every row is sent to before commit
            id_factory: Expense ID generator (random UUIDs by default)
        """
        self.state = state
        self.sink = sink
        self.id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._rows: list[DraftRow] = [DraftRow()]

    # Rows

    @property
    def rows(self) -> list[DraftRow]:
        return list(self._rows)

    def row(self, index: int) -> DraftRow:
        return self._rows[index]

    def add_row(self) -> int:
        """Append a default row and return its index."""
        self._rows.append(DraftRow())
        return len(self._rows) - 1

    def remove_row(self, index: int) -> bool:
        """Delete the row at a position. The form may become empty."""
        if 0 <= index < len(self._rows):
            del self._rows[index]
            return True
        return False

    def total(self) -> int:
        """Sum of all draft row totals."""
        return sum(r.total for r in self._rows)

    # Field setters

    def set_date(self, index: int, value: date) -> None:
        self._rows[index].date = value

    def set_category(self, index: int, name: str) -> None:
        """Select a category. Clears the row's subcategory."""
        row = self._rows[index]
        row.category = name
        row.subcategory = ""

    def set_subcategory(self, index: int, name: str) -> None:
        self._rows[index].subcategory = name

    def set_description(self, index: int, text: str) -> None:
        self._rows[index].description = text

    def set_recipient(self, index: int, text: str) -> None:
        self._rows[index].recipient = text

    def set_quantity(self, index: int, value: int) -> None:
        """Set quantity, clamped to at least 1."""
        self._rows[index].quantity = max(1, int(value))

    def set_quantity_text(self, index: int, text: str) -> None:
        """Set quantity from typed text. Non-digits are dropped; empty means 1."""
        digits = digits_only(text)
        self.set_quantity(index, int(digits) if digits else 1)

    def set_unit_price(self, index: int, value: int) -> None:
        """Set unit price, clamped to at least 0."""
        self._rows[index].unit_price = max(0, int(value))

    def set_unit_price_text(self, index: int, text: str) -> None:
        """Set unit price from typed text. Non-digits are dropped; empty means 0."""
        digits = digits_only(text)
        self.set_unit_price(index, int(digits) if digits else 0)

    # Searchable pickers

    def category_suggestions(self, query: str) -> list[Category]:
        """Categories whose name contains the query, ignoring case."""
        needle = query.lower()
        return [c for c in self.state.categories.list_categories() if needle in c.name.lower()]

    def offers_new_category(self, query: str) -> bool:
        """True if the query matches no category name exactly, ignoring case."""
        if not query:
            return False
        needle = query.lower()
        return not any(c.name.lower() == needle for c in self.category_suggestions(query))

    def subcategory_suggestions(self, category_name: str, query: str) -> list[str]:
        cat = self.state.categories.get_category(category_name)
        if cat is None:
            return []
        needle = query.lower()
        return [s for s in cat.subcategories if needle in s.lower()]

    def offers_new_subcategory(self, category_name: str, query: str) -> bool:
        if not query or self.state.categories.get_category(category_name) is None:
            return False
        needle = query.lower()
        return not any(
            s.lower() == needle for s in self.subcategory_suggestions(category_name, query)
        )

    # Taxonomy changes

    def create_category(self, index: int, name: str, confirm: Optional[Confirm] = None) -> bool:
        """Create a category from a row and select it there.

        If a category with the same name (ignoring case) exists, it is
        selected instead and nothing is created.

        Returns:
            True if a category was created

        Raises:
            ValidationError: If the name is not acceptable
        """
        existing = self._match_category(name)
        if existing is not None:
            self.set_category(index, existing.name)
            return False
        validate_category_name(name)
        if not _confirmed(confirm, f'Are you sure you want to add "{name}" as a new category?'):
            return False
        self.state.categories.add_category(name)
        self.set_category(index, name)
        return True

    def create_subcategory(self, index: int, name: str, confirm: Optional[Confirm] = None) -> bool:
        """Add a subcategory to the row's category and select it.

        Raises:
            ValidationError: If the row has no known category or the name
                is not acceptable
        """
        category_name = self._rows[index].category
        if self.state.categories.get_category(category_name) is None:
            raise ValidationError("Select a category first")
        existing = self._match_subcategory(category_name, name)
        if existing is not None:
            self.set_subcategory(index, existing)
            return False
        validate_subcategory_name(name)
        question = f'Are you sure you want to add "{name}" as a new subcategory to "{category_name}"?'
        if not _confirmed(confirm, question):
            return False
        self.state.categories.add_subcategory(category_name, name)
        self.set_subcategory(index, name)
        return True

    def remove_category(self, name: str, confirm: Optional[Confirm] = None) -> bool:
        """Remove a user-defined category and its expenses.

        Raises:
            ProtectedEntryError: If the category is a default one
        """
        cat = self.state.categories.get_category(name)
        if cat is None:
            return False
        if cat.is_default:
            raise ProtectedEntryError(default_category_protected(name))
        if not _confirmed(confirm, f'Are you sure you want to remove the category "{name}"?'):
            return False
        removed = self.state.categories.remove_category(name)
        if removed:
            for row in self._rows:
                if row.category == name:
                    row.category = ""
                    row.subcategory = ""
        return removed

    def remove_subcategory(
        self, category_name: str, subcategory: str, confirm: Optional[Confirm] = None
    ) -> bool:
        """Remove a subcategory unless it is an original default entry.

        Raises:
            ProtectedEntryError: If the subcategory was seeded with a default category
        """
        if self.state.categories.is_protected_subcategory(category_name, subcategory):
            raise ProtectedEntryError(default_subcategory_protected(category_name, subcategory))
        question = f'Are you sure you want to remove the subcategory "{subcategory}"?'
        if not _confirmed(confirm, question):
            return False
        return self.state.categories.remove_subcategory(category_name, subcategory)

    # Saving

    async def submit(self) -> list[RowOutcome]:
        """Send every row to the sink in order, committing accepted rows.

        Rows are sent one at a time. Rejected rows are not retried. The form
        is reset to a single default row afterwards whatever the outcome;
        rejected drafts are only available through the returned outcomes.

        Returns:
            One outcome per submitted row, in row order
        """
        logger.info(f"Submitting {len(self._rows)} expense row(s)")
        outcomes = []
        for index, draft in enumerate(self._rows):
            expense = self._finalize(draft)
            result = await self.sink.send(expense)
            if result.success:
                self.state.expenses.add_expense(expense)
                outcomes.append(RowOutcome(index=index, draft=draft, expense=expense))
            else:
                logger.warning(f"Row {index + 1} was not saved: {result.detail}")
                outcomes.append(RowOutcome(index=index, draft=draft, error=_sink_error(result)))

        self._rows = [DraftRow()]
        return outcomes

    def _finalize(self, draft: DraftRow) -> Expense:
        quantity = max(1, draft.quantity)
        unit_price = max(0, draft.unit_price)
        return Expense(
            id=self.id_factory(),
            date=draft.date,
            category=draft.category,
            subcategory=draft.subcategory,
            description=draft.description,
            quantity=quantity,
            unit_price=unit_price,
            recipient=draft.recipient,
            total_amount=quantity * unit_price,
        )

    def _match_category(self, name: str) -> Optional[Category]:
        for cat in self.state.categories.list_categories():
            if cat.name.lower() == name.lower():
                return cat
        return None

    def _match_subcategory(self, category_name: str, name: str) -> Optional[str]:
        for sub in self.subcategory_suggestions(category_name, name):
            if sub.lower() == name.lower():
                return sub
        return None


def _sink_error(result: SinkResult) -> SinkError:
    if result.reason is SinkFailureReason.NOT_CONFIGURED:
        return SinkNotConfiguredError(sink_not_configured())
    return SinkTransportError(sink_failed(result.detail or "unknown error"))
