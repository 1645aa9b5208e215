"""Tests for derivation trees."""

import pytest

from seqprover.core.logic import Variable, And, Or, Sequent, ASCII_GLYPHS
from seqprover.core.exceptions import InternalError
from seqprover.fileformats.parser import parse_sequent_string
from seqprover.proofs.derivation import SequentNode, FailLeaf
from seqprover.search import BackwardSearch

A, B = Variable("A"), Variable("B")


def prove(text):
    return BackwardSearch().prove(parse_sequent_string(text))


class TestConstruction:
    """Test the node invariants."""

    def test_leaf(self):
        node = SequentNode(Sequent([A], [A]), rule="axiom")
        assert node.is_closed
        assert node.is_proved
        assert not node.is_failed

    def test_fail_leaf(self):
        leaf = FailLeaf()
        assert leaf.children == ()
        assert not leaf.is_proved
        assert str(leaf) == "Fail"
        assert FailLeaf() == leaf

    def test_children_become_tuple(self):
        child = SequentNode(Sequent([A], [A]))
        node = SequentNode(Sequent([A, B], [A]), [child])
        assert node.children == (child,)

    def test_too_many_children(self):
        leaf = SequentNode(Sequent([A], [A]))
        with pytest.raises(InternalError):
            SequentNode(Sequent(), (leaf, leaf, leaf))

    def test_fail_leaf_must_be_alone(self):
        leaf = SequentNode(Sequent([A], [A]))
        with pytest.raises(InternalError):
            SequentNode(Sequent(), (leaf, FailLeaf()))

    def test_invalid_child(self):
        with pytest.raises(InternalError):
            SequentNode(Sequent(), ("Fail",))


class TestQueries:
    """Test tree queries on search results."""

    def test_proved_tree(self):
        root = prove("A ∧ B ⊦ B ∧ A")
        assert root.is_proved
        assert root.failed_sequents() == []
        # root, branch, two axiom reductions, two closed axioms
        assert root.size == 6
        assert root.depth == 4
        assert [leaf.sequent for leaf in root.leaves()] == [
            Sequent([B], [B]), Sequent([A], [A])
        ]

    def test_failed_tree(self):
        root = prove("A ∨ B ⊦ A ∧ B")
        assert not root.is_proved
        assert root.failed_sequents() == [Sequent([A], [B]), Sequent([B], [A])]

    def test_walk_is_preorder(self):
        root = prove("A ∨ B ⊦ A")
        assert [n.sequent for n in root.walk()] == [
            Sequent([Or(A, B)], [A]),
            Sequent([A], [A]),
            Sequent([B], [A]),
        ]

    def test_axiom_leaf_iff_exact_axiom(self):
        """A root without children occurs exactly for v ⊦ v."""
        assert prove("A ⊦ A").is_closed
        assert not prove("A, A ⊦ A").is_closed
        assert not prove("A ⊦ A, B").is_closed
        assert not prove("A ∧ A ⊦ A").is_closed

    def test_immutable(self):
        root = prove("A ⊦ A")
        with pytest.raises(AttributeError):
            root.children = ()


class TestPretty:
    """Test the indented text rendering."""

    def test_pretty(self):
        root = prove("A ∨ B ⊦ A")
        assert root.pretty() == (
            "A ∨ B ⊦ A\n"
            "  A ⊦ A  ✓\n"
            "  B ⊦ A\n"
            "    Fail"
        )

    def test_pretty_with_rules(self):
        root = prove("A ∧ B ⊦ A")
        assert root.pretty(show_rules=True) == (
            "A ∧ B ⊦ A  [left_unfold]\n"
            "  A, B ⊦ A  [axiom]\n"
            "    A ⊦ A  ✓"
        )

    def test_pretty_ascii(self):
        root = prove("⊦ A ∧ B")
        assert root.pretty(glyphs=ASCII_GLYPHS).splitlines()[0] == "> A & B"

    def test_str(self):
        assert str(prove("A ⊦ B")) == "A ⊦ B\n  Fail"
