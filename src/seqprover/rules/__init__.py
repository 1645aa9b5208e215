"""Sequent calculus rules."""

from .base import Rule, RuleApplication
from .axiom import AxiomRule
from .unfolding import LeftUnfoldRule, RightUnfoldRule
from .branching import LeftBranchRule, RightBranchRule

__all__ = [
    'Rule', 'RuleApplication',
    'AxiomRule',
    'LeftUnfoldRule', 'RightUnfoldRule',
    'LeftBranchRule', 'RightBranchRule'
]
