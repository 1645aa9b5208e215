"""Base class for proof search strategies."""

from abc import ABC, abstractmethod

from seqprover.core.logic import Sequent
from seqprover.proofs.derivation import SequentNode


class Search(ABC):
    """Abstract base class for proof search strategies."""

    @abstractmethod
    def prove(self, sequent: Sequent) -> SequentNode:
        """
        Build a derivation tree rooted at ``sequent``.

        The result is returned whether or not the sequent is provable;
        check ``is_proved`` on the root.
        """
        pass

    def is_provable(self, sequent: Sequent) -> bool:
        """Check if the sequent is provable."""
        return self.prove(sequent).is_proved
