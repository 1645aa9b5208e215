"""Propositional terms and sequents."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


# Canonical glyphs
TURNSTILE = "⊦"
EMPTY = "∅"
NOT = "¬"
AND = "∧"
OR = "∨"

# ASCII aliases accepted on input
ASCII_ALIASES = {
    "!": NOT,
    "&": AND,
    "|": OR,
    ">": TURNSTILE,
}


class Term:
    """Base class for propositional terms.

    Terms are immutable trees; two terms are equal when they have the same shape.
    """

    def to_string(self, is_root: bool = False, glyphs=None) -> str:
        raise NotImplementedError

    def connectives(self) -> int:
        """Number of logical connectives in this term."""
        raise NotImplementedError

    def variables(self) -> FrozenSet[str]:
        """Names of all variables occurring in this term."""
        raise NotImplementedError

    def __str__(self):
        return self.to_string(is_root=True)


@dataclass(frozen=True)
class Variable(Term):
    name: str

    def to_string(self, is_root: bool = False, glyphs=None) -> str:
        return self.name

    def connectives(self) -> int:
        return 0

    def variables(self) -> FrozenSet[str]:
        return frozenset({self.name})


@dataclass(frozen=True)
class Not(Term):
    child: Term

    def to_string(self, is_root: bool = False, glyphs=None) -> str:
        glyphs = glyphs or UNICODE_GLYPHS
        s = glyphs[NOT] + self.child.to_string(glyphs=glyphs)
        if not is_root:
            s = f"({s})"
        return s

    def connectives(self) -> int:
        return 1 + self.child.connectives()

    def variables(self) -> FrozenSet[str]:
        return self.child.variables()


@dataclass(frozen=True)
class _Binary(Term):
    left: Term
    right: Term

    symbol = None

    def to_string(self, is_root: bool = False, glyphs=None) -> str:
        glyphs = glyphs or UNICODE_GLYPHS
        s = (self.left.to_string(glyphs=glyphs) +
             f" {glyphs[self.symbol]} " +
             self.right.to_string(glyphs=glyphs))
        if not is_root:
            s = f"({s})"
        return s

    def connectives(self) -> int:
        return 1 + self.left.connectives() + self.right.connectives()

    def variables(self) -> FrozenSet[str]:
        return self.left.variables() | self.right.variables()


@dataclass(frozen=True)
class And(_Binary):
    symbol = AND


@dataclass(frozen=True)
class Or(_Binary):
    symbol = OR


UNICODE_GLYPHS = {
    TURNSTILE: TURNSTILE,
    EMPTY: EMPTY,
    NOT: NOT,
    AND: AND,
    OR: OR,
}

# The empty side has no ASCII spelling; it is written as nothing at all.
ASCII_GLYPHS = {glyph: alias for alias, glyph in ASCII_ALIASES.items()}
ASCII_GLYPHS[EMPTY] = ""


@dataclass(frozen=True)
class Sequent:
    """An antecedent and a succedent, each an ordered tuple of terms.

    Multiplicities are preserved. Lists passed in are converted to tuples so
    a sequent never shares mutable state with its caller.
    """
    left: Tuple[Term, ...] = field(default_factory=tuple)
    right: Tuple[Term, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'left', tuple(self.left))
        object.__setattr__(self, 'right', tuple(self.right))

    @property
    def is_empty(self) -> bool:
        return not self.left and not self.right

    def connectives(self) -> int:
        """Total connective count over both sides."""
        return sum(t.connectives() for t in self.left + self.right)

    def variables(self) -> FrozenSet[str]:
        names = frozenset()
        for t in self.left + self.right:
            names |= t.variables()
        return names

    def to_string(self, glyphs=None) -> str:
        glyphs = glyphs or UNICODE_GLYPHS

        def format_terms(terms):
            if not terms:
                return glyphs[EMPTY]
            return ", ".join(t.to_string(is_root=True, glyphs=glyphs) for t in terms)

        left = format_terms(self.left)
        right = format_terms(self.right)
        return " ".join(s for s in (left, glyphs[TURNSTILE], right) if s)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Sequent({self})"
