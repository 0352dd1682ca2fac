from __future__ import annotations

from .form import FormDriver
from .selectors import ADDRESS_INPUT_SELECTORS, SUBMIT_SELECTORS, FieldLocator
from .session import BrowserSession, SessionFactory, session_scope
from .waiter import RESULT_MARKERS, ResultWaiter

__all__ = [
    "ADDRESS_INPUT_SELECTORS",
    "SUBMIT_SELECTORS",
    "RESULT_MARKERS",
    "BrowserSession",
    "SessionFactory",
    "session_scope",
    "FieldLocator",
    "FormDriver",
    "ResultWaiter",
]
