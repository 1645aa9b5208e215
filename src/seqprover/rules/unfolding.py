"""Single-premise rules: ¬ and ∧ on the left, ¬ and ∨ on the right."""

from typing import Optional

from .base import Rule, RuleApplication, find_first, replace_at
from seqprover.core.logic import Sequent, Not, And, Or


class LeftUnfoldRule(Rule):
    """Unfold the first ``¬`` or ``∧`` in the antecedent.

    ``Γ, ¬A ⊦ Δ`` becomes ``Γ ⊦ Δ, A`` and ``Γ, A ∧ B ⊦ Δ`` becomes
    ``Γ, A, B ⊦ Δ`` with ``A, B`` taking the place of the conjunction.
    """

    @property
    def name(self) -> str:
        return "left_unfold"

    def apply(self, sequent: Sequent) -> Optional[RuleApplication]:
        i = find_first(sequent.left, Not, And)
        if i is None:
            return None

        term = sequent.left[i]
        if isinstance(term, Not):
            premise = Sequent(replace_at(sequent.left, i), sequent.right + (term.child,))
        else:
            premise = Sequent(replace_at(sequent.left, i, term.left, term.right), sequent.right)

        return RuleApplication(
            rule_name=self.name,
            premises=[premise],
            metadata={"side": "left", "index": i, "connective": type(term).__name__}
        )


class RightUnfoldRule(Rule):
    """Unfold the first ``¬`` or ``∨`` in the succedent.

    ``Γ ⊦ ¬A, Δ`` becomes ``Γ, A ⊦ Δ`` and ``Γ ⊦ A ∨ B, Δ`` becomes
    ``Γ ⊦ A, B, Δ``.
    """

    @property
    def name(self) -> str:
        return "right_unfold"

    def apply(self, sequent: Sequent) -> Optional[RuleApplication]:
        i = find_first(sequent.right, Not, Or)
        if i is None:
            return None

        term = sequent.right[i]
        if isinstance(term, Not):
            premise = Sequent(sequent.left + (term.child,), replace_at(sequent.right, i))
        else:
            premise = Sequent(sequent.left, replace_at(sequent.right, i, term.left, term.right))

        return RuleApplication(
            rule_name=self.name,
            premises=[premise],
            metadata={"side": "right", "index": i, "connective": type(term).__name__}
        )
