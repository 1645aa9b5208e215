"""Base interface for sequent calculus rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple, Type

from seqprover.core.logic import Sequent, Term


@dataclass
class RuleApplication:
    """Result of applying a rule backwards to a sequent.

    ``premises`` are the sequents that must be proved in turn. A closed
    application (an axiom that is already minimal) has no premises.
    """
    rule_name: str
    premises: List[Sequent] = field(default_factory=list)
    closed: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)


class Rule(ABC):
    """Abstract base class for sequent calculus rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the rule."""
        pass

    @abstractmethod
    def apply(self, sequent: Sequent) -> Optional[RuleApplication]:
        """
        Apply the rule backwards to the given sequent.

        Args:
            sequent: The sequent to be proved

        Returns:
            RuleApplication if the rule applies, None otherwise
        """
        pass

    def is_applicable(self, sequent: Sequent) -> bool:
        """
        Check if the rule can be applied to the given sequent.

        Default implementation tries to apply and checks if result is not None.
        """
        return self.apply(sequent) is not None


def find_first(terms: Tuple[Term, ...], *kinds: Type[Term]) -> Optional[int]:
    """Index of the first term that is an instance of one of ``kinds``."""
    for i, term in enumerate(terms):
        if isinstance(term, kinds):
            return i
    return None


def replace_at(terms: Tuple[Term, ...], index: int, *replacements: Term) -> Tuple[Term, ...]:
    """Copy of ``terms`` with the term at ``index`` replaced by ``replacements``."""
    return terms[:index] + replacements + terms[index + 1:]
