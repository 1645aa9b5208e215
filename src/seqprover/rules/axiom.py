"""Axiom rule: close a sequent sharing a variable between its two sides."""

from typing import Optional, Tuple

from .base import Rule, RuleApplication
from seqprover.core.logic import Sequent, Variable


class AxiomRule(Rule):
    """Closes ``Γ, v ⊦ v, Δ`` by reducing it to the axiom ``v ⊦ v``.

    Only variables are matched. A compound term appearing on both sides is
    not an axiom; it has to be unfolded down to its variables first.
    """

    @property
    def name(self) -> str:
        return "axiom"

    def apply(self, sequent: Sequent) -> Optional[RuleApplication]:
        match = self.find_shared_variable(sequent)
        if match is None:
            return None

        i, j = match
        left, right = sequent.left[i], sequent.right[j]
        metadata = {"variable": left.name, "left_index": i, "right_index": j}

        # Already in the form v ⊦ v
        if len(sequent.left) == 1 and len(sequent.right) == 1:
            return RuleApplication(self.name, closed=True, metadata=metadata)

        return RuleApplication(
            rule_name=self.name,
            premises=[Sequent((left,), (right,))],
            metadata=metadata
        )

    @staticmethod
    def find_shared_variable(sequent: Sequent) -> Optional[Tuple[int, int]]:
        """Indices of the first left variable with a same-named right variable.

        Left terms are scanned in order, and for each of them the right terms
        in order; the first hit wins.
        """
        for i, lt in enumerate(sequent.left):
            if not isinstance(lt, Variable):
                continue
            for j, rt in enumerate(sequent.right):
                if isinstance(rt, Variable) and rt.name == lt.name:
                    return i, j
        return None
