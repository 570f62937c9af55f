"""
Yahtzee - Scorecard

One slot per category. A slot is None until a score is recorded and can
never be changed afterwards. Totals are derived on every call rather than
stored, so they always agree with the slots.
"""

from src.engine.base import Category
from src.engine.errors import CategoryAlreadyScored
from src.engine.validators import validate_score
from src.engine.views import CategoryLine, ScorecardView


class Scorecard:
    """A single player's scorecard."""

    UPPER_BONUS = 35
    UPPER_BONUS_THRESHOLD = 63

    def __init__(self) -> None:
        self._slots: dict[Category, int | None] = {category: None for category in Category}

    def record(self, category: Category | str, score: int) -> int:
        """
        Record a score in an empty slot.

        Args:
            category: Slot to fill
            score: Points for the slot (0 is valid)

        Returns:
            The recorded score

        Raises:
            InvalidCategorySelection: If the category is unknown
            CategoryAlreadyScored: If the slot already holds a score
            ValueError: If the score is not a non-negative integer
        """
        category = Category.parse(category)
        existing = self._slots[category]
        if existing is not None:
            raise CategoryAlreadyScored(category, existing)
        self._slots[category] = validate_score(score)
        return score

    def read(self, category: Category | str) -> int | None:
        """Score in a slot, or None when it is still open."""
        return self._slots[Category.parse(category)]

    def open_categories(self) -> tuple[Category, ...]:
        return tuple(c for c, s in self._slots.items() if s is None)

    def is_complete(self) -> bool:
        return all(s is not None for s in self._slots.values())

    def _subtotal(self, categories: tuple[Category, ...]) -> int:
        return sum(self._slots[c] or 0 for c in categories)

    def upper_subtotal(self) -> int:
        """Raw sum of the six number categories."""
        return self._subtotal(Category.upper())

    def upper_bonus(self) -> int:
        if self.upper_subtotal() >= self.UPPER_BONUS_THRESHOLD:
            return self.UPPER_BONUS
        return 0

    def upper_total(self) -> int:
        return self.upper_subtotal() + self.upper_bonus()

    def lower_subtotal(self) -> int:
        return self._subtotal(Category.lower())

    def grand_total(self) -> int:
        return self.upper_total() + self.lower_subtotal()

    def view(self, player_index: int = 0) -> ScorecardView:
        """Immutable snapshot of the slots and totals for display."""
        def lines(categories: tuple[Category, ...]) -> tuple[CategoryLine, ...]:
            return tuple(
                CategoryLine(category=c.value, label=c.label, score=self._slots[c])
                for c in categories
            )

        return ScorecardView(
            player_index=player_index,
            upper=lines(Category.upper()),
            lower=lines(Category.lower()),
            upper_subtotal=self.upper_subtotal(),
            upper_bonus=self.upper_bonus(),
            upper_total=self.upper_total(),
            lower_total=self.lower_subtotal(),
            grand_total=self.grand_total(),
            is_complete=self.is_complete(),
        )
