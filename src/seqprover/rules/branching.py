"""Two-premise rules: ∨ on the left and ∧ on the right."""

from typing import Optional

from .base import Rule, RuleApplication, find_first, replace_at
from seqprover.core.logic import Sequent, And, Or


class LeftBranchRule(Rule):
    """Split on the first ``∨`` in the antecedent.

    ``Γ, A ∨ B ⊦ Δ`` needs both ``Γ, A ⊦ Δ`` and ``Γ, B ⊦ Δ``.
    """

    @property
    def name(self) -> str:
        return "left_branch"

    def apply(self, sequent: Sequent) -> Optional[RuleApplication]:
        i = find_first(sequent.left, Or)
        if i is None:
            return None

        term = sequent.left[i]
        return RuleApplication(
            rule_name=self.name,
            premises=[
                Sequent(replace_at(sequent.left, i, term.left), sequent.right),
                Sequent(replace_at(sequent.left, i, term.right), sequent.right),
            ],
            metadata={"side": "left", "index": i, "connective": "Or"}
        )


class RightBranchRule(Rule):
    """Split on the first ``∧`` in the succedent.

    ``Γ ⊦ A ∧ B, Δ`` needs both ``Γ ⊦ A, Δ`` and ``Γ ⊦ B, Δ``.
    """

    @property
    def name(self) -> str:
        return "right_branch"

    def apply(self, sequent: Sequent) -> Optional[RuleApplication]:
        i = find_first(sequent.right, And)
        if i is None:
            return None

        term = sequent.right[i]
        return RuleApplication(
            rule_name=self.name,
            premises=[
                Sequent(sequent.left, replace_at(sequent.right, i, term.left)),
                Sequent(sequent.left, replace_at(sequent.right, i, term.right)),
            ],
            metadata={"side": "right", "index": i, "connective": "And"}
        )
