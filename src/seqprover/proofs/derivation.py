"""Derivation trees produced by proof search."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from seqprover.core.logic import Sequent
from seqprover.core.exceptions import InternalError


FAIL = "Fail"


@dataclass(frozen=True)
class FailLeaf:
    """Marks a branch where no rule applies and no variable is shared."""

    @property
    def children(self) -> Tuple:
        return ()

    @property
    def is_proved(self) -> bool:
        return False

    def __str__(self):
        return FAIL


@dataclass(frozen=True)
class SequentNode:
    """A sequent together with the derivations of its premises.

    The number of children tells what kind of step was taken:

    - none: the branch is closed by the axiom ``v ⊦ v``
    - one: a single-premise step, or a lone FailLeaf if the sequent is unprovable
    - two: a branching step, proved only if both children are proved

    ``rule`` is the name of the rule applied at this node, ``"fail"`` for a
    node whose only child is a FailLeaf.
    """
    sequent: Sequent
    children: Tuple['DerivationNode', ...] = field(default_factory=tuple)
    rule: Optional[str] = None

    def __post_init__(self):
        children = tuple(self.children)
        object.__setattr__(self, 'children', children)
        if len(children) > 2:
            raise InternalError(f"Derivation node with {len(children)} children")
        for child in children:
            if not isinstance(child, (SequentNode, FailLeaf)):
                raise InternalError(f"Invalid derivation child: {child!r}")
        if len(children) == 2 and any(isinstance(c, FailLeaf) for c in children):
            raise InternalError("A fail leaf must be the only child of its node")

    @property
    def is_closed(self) -> bool:
        """True for a leaf closed by an axiom."""
        return not self.children

    @property
    def is_failed(self) -> bool:
        """True if this node's only child is a FailLeaf."""
        return len(self.children) == 1 and isinstance(self.children[0], FailLeaf)

    @property
    def is_proved(self) -> bool:
        """True if no FailLeaf occurs anywhere below this node."""
        return all(child.is_proved for child in self.children)

    @property
    def depth(self) -> int:
        """Number of sequent nodes on the longest path from here to a leaf."""
        return 1 + max((c.depth for c in self.children if isinstance(c, SequentNode)),
                       default=0)

    @property
    def size(self) -> int:
        """Number of sequent nodes in this tree."""
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator['SequentNode']:
        """Pre-order traversal over the sequent nodes of this tree."""
        yield self
        for child in self.children:
            if isinstance(child, SequentNode):
                yield from child.walk()

    def leaves(self) -> List['SequentNode']:
        """Closed and failed nodes, left to right."""
        return [node for node in self.walk() if node.is_closed or node.is_failed]

    def failed_sequents(self) -> List[Sequent]:
        """Sequents at which the search failed.

        Each one consists of variables only, with no name on both sides, so
        making every left variable true and every right variable false
        falsifies the root sequent.
        """
        return [node.sequent for node in self.walk() if node.is_failed]

    def pretty(self, show_rules: bool = False, glyphs=None) -> str:
        """Indented text rendering of the tree, one sequent per line."""
        lines = []

        def visit(node, indent):
            pad = "  " * indent
            if isinstance(node, FailLeaf):
                lines.append(f"{pad}{FAIL}")
                return
            text = node.sequent.to_string(glyphs=glyphs)
            if node.is_closed:
                text += "  ✓"
            if show_rules and node.rule and not node.is_closed:
                text += f"  [{node.rule}]"
            lines.append(pad + text)
            for child in node.children:
                visit(child, indent + 1)

        visit(self, 0)
        return "\n".join(lines)

    def __str__(self):
        return self.pretty()


DerivationNode = Union[SequentNode, FailLeaf]
