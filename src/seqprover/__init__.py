"""
seqprover: A propositional sequent calculus prover.

seqprover decides whether a classical propositional sequent is provable and
builds a derivation tree showing why. It includes:

- Propositional terms (¬, ∧, ∨) and sequents
- A precedence-aware parser accepting Unicode glyphs or ASCII aliases
- Backward proof search with a fixed rule priority
- Derivation trees with JSON export for renderers

Basic usage:
    >>> from seqprover import prove
    >>> proof = prove("A ∧ B ⊦ B ∧ A")
    >>> proof.is_proved
    True
    >>> print(prove("A > B"))
    A ⊦ B
      Fail
"""

from typing import Any, Dict, Union

__version__ = "0.1.0"

# Core data structures
from seqprover.core import (
    Term, Variable, Not, And, Or, Sequent,
    SequentSyntaxError, InternalError,
    sequent_to_json, sequent_from_json
)

# Parsing and formatting
from seqprover.fileformats import (
    Tokenizer, parse_term, parse_sequent, parse_sequent_string,
    get_format_handler
)

# Rules
from seqprover.rules import (
    Rule, RuleApplication,
    AxiomRule, LeftUnfoldRule, RightUnfoldRule, LeftBranchRule, RightBranchRule
)

# Derivation trees
from seqprover.proofs import (
    SequentNode, FailLeaf,
    derivation_to_dict, derivation_to_json, derivation_from_json,
    save_derivation, load_derivation
)

# Search
from seqprover.search import Search, BackwardSearch, get_search

# Configuration
from seqprover.utils.config import get_config


def parse(text: str) -> Sequent:
    """Parse a sequent such as ``"A, B ⊦ A ∧ B"``."""
    return parse_sequent_string(text)


def prove(sequent: Union[str, Sequent], search: str = "backward", **kwargs) -> SequentNode:
    """
    Build a derivation tree for a sequent.

    Args:
        sequent: The sequent, or a string to parse into one
        search: Name of the search strategy (default: "backward")
        **kwargs: Additional arguments for the search strategy

    Returns:
        Root SequentNode of the derivation; check ``is_proved``

    Raises:
        SequentSyntaxError: If a string is given and it does not parse
    """
    if isinstance(sequent, str):
        sequent = parse(sequent)
    return get_search(search, **kwargs).prove(sequent)


def prove_string(text: str, search: str = "backward", glyphs=None) -> Dict[str, Any]:
    """
    Parse and prove a sequent string, returning a payload for a renderer.

    On success: ``{"ok": True, "sequent": ..., "proved": ..., "derivation": {...}}``.
    On a syntax error: ``{"ok": False, "error": {"message": ..., "position": ...}}``.
    """
    try:
        sequent = parse(text)
    except SequentSyntaxError as e:
        return {"ok": False, "error": e.to_dict()}

    root = prove(sequent, search=search)
    return {
        "ok": True,
        "sequent": sequent.to_string(glyphs=glyphs),
        "proved": root.is_proved,
        "derivation": derivation_to_dict(root, glyphs),
    }


__all__ = [
    # Version
    "__version__",

    # Core
    "Term", "Variable", "Not", "And", "Or", "Sequent",
    "SequentSyntaxError", "InternalError",
    "sequent_to_json", "sequent_from_json",

    # Parsing
    "Tokenizer", "parse_term", "parse_sequent", "parse_sequent_string",
    "get_format_handler",

    # Rules
    "Rule", "RuleApplication",
    "AxiomRule", "LeftUnfoldRule", "RightUnfoldRule", "LeftBranchRule", "RightBranchRule",

    # Derivations
    "SequentNode", "FailLeaf",
    "derivation_to_dict", "derivation_to_json", "derivation_from_json",
    "save_derivation", "load_derivation",

    # Search
    "Search", "BackwardSearch", "get_search",

    # Configuration
    "get_config",

    # High-level API
    "parse", "prove", "prove_string"
]
