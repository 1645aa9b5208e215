"""Backward proof search.

This module implements root-first proof search for classical propositional
sequents. At every sequent the rules are tried in a fixed priority order and
the first one that applies determines the node:

1. axiom by a variable shared between both sides
2. ``¬``/``∧`` on the left
3. ``¬``/``∨`` on the right
4. ``∨`` on the left (two premises)
5. ``∧`` on the right (two premises)

If none applies, the sequent contains only variables and no variable is
shared, so the branch fails. Every rule removes one connective from each
premise, so the search depth is bounded by the connective count of the
input and the search always terminates.
"""

import logging
from typing import List, Optional

from seqprover.core.logic import Sequent
from seqprover.proofs.derivation import SequentNode, FailLeaf
from seqprover.rules import (
    Rule, AxiomRule,
    LeftUnfoldRule, RightUnfoldRule,
    LeftBranchRule, RightBranchRule
)
from .base import Search

logger = logging.getLogger(__name__)


def default_rules() -> List[Rule]:
    """The rules in priority order."""
    return [
        AxiomRule(),
        LeftUnfoldRule(),
        RightUnfoldRule(),
        LeftBranchRule(),
        RightBranchRule(),
    ]


class BackwardSearch(Search):
    """Depth-first backward search over sequent calculus rules.

    No recursion limit is imposed beyond Python's own; a sequent with more
    connectives than the interpreter's recursion limit raises RecursionError.
    """

    def __init__(self, rules: Optional[List[Rule]] = None):
        """
        Initialize the search.

        Args:
            rules: Rules in priority order (default: default_rules())
        """
        self.rules = list(rules) if rules is not None else default_rules()

    def prove(self, sequent: Sequent) -> SequentNode:
        logger.debug("Proof search: %s", sequent)
        root = self._prove(sequent, 0)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Result: %s (%d nodes, depth %d)",
                         "proved" if root.is_proved else "not proved", root.size, root.depth)
        return root

    def _prove(self, sequent: Sequent, depth: int) -> SequentNode:
        for rule in self.rules:
            application = rule.apply(sequent)
            if application is None:
                continue

            logger.debug("%s%s by %s", "  " * depth, sequent, application.rule_name)
            if application.closed:
                return SequentNode(sequent, rule=application.rule_name)

            children = tuple(self._prove(premise, depth + 1)
                             for premise in application.premises)
            return SequentNode(sequent, children, rule=application.rule_name)

        logger.debug("%s%s fails", "  " * depth, sequent)
        return SequentNode(sequent, (FailLeaf(),), rule="fail")
