from __future__ import annotations


class InputValidationError(ValueError):
    """Raised when a query or an input stream cannot be represented as a problem."""


class SearchInvariantError(RuntimeError):
    """Raised when the search machinery is driven outside its contract."""


class StackOverflowError(SearchInvariantError):
    """Raised on push into a full traversal stack."""


class StackUnderflowError(SearchInvariantError):
    """Raised on pop from an empty traversal stack."""


class StateOutOfBoundsError(SearchInvariantError):
    """Raised when a state falls outside the memo table's lattice."""


class MemoInvariantError(SearchInvariantError):
    """Raised when a dead state would be marked dead a second time."""


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search hits its configured step limit before finishing."""
