"""
Strategy chain — ordered, error-tolerant identifier lookups.

Usage:
    chain = Chain([
        xmp_document_id,
        xmp_description_attribute,
        trailer_id if use_trailer else None,  # conditional
    ])

    identifier = chain.execute(reader)

Strategies are plain callables:
    def strategy(subject) -> Optional[uuid.UUID]: ...

The chain skips None entries, tries strategies in order, and returns the
first identifier found. A strategy that raises is recorded as a failed
Attempt and the next one runs; only errors about the file itself
(FATAL_ERRORS) escape.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)

# The input itself is gone or unreadable: not a lookup failure.
FATAL_ERRORS = (PermissionError, FileNotFoundError)

Strategy = Callable[[Any], Optional[uuid.UUID]]


@dataclass
class Attempt:
    """One strategy run: what was tried and what came out of it."""

    strategy: str
    identifier: Optional[uuid.UUID] = None
    error: Optional[str] = None


def strategy_name(strategy: Strategy) -> str:
    return getattr(strategy, "__name__", strategy.__class__.__name__)


class Chain:
    """Sequential strategy executor.

    - Filters None strategies (conditional lookups)
    - Catches errors per-strategy (logs, continues)
    - Stops at the first identifier
    """

    def __init__(self, strategies: list, name: str = "chain"):
        self.strategies = [s for s in strategies if s is not None]
        self.name = name

    def execute(self, subject: Any, attempts: Optional[List[Attempt]] = None) -> Optional[uuid.UUID]:
        """Run strategies against subject; return the first identifier or None."""
        if attempts is None:
            attempts = []
        for strategy in self.strategies:
            name = strategy_name(strategy)
            try:
                result = strategy(subject)
            except FATAL_ERRORS:
                raise
            except Exception as e:
                logger.debug("%s: %s failed: %s", self.name, name, e)
                attempts.append(Attempt(name, error=f"{e.__class__.__name__}: {e}"))
                continue

            attempts.append(Attempt(name, identifier=result))
            if result is not None:
                logger.debug("%s: %s -> %s", self.name, name, result)
                return result
        return None

    def __repr__(self):
        names = [strategy_name(s) for s in self.strategies]
        return f"Chain({' -> '.join(names)})"
