"""End-to-end properties of parsing and proving."""

import random

import pytest

import seqprover
from seqprover import (
    Variable, Not, And, Or, Sequent, SequentSyntaxError,
    parse, prove, prove_string, get_format_handler
)


def random_term(rng, depth):
    if depth == 0 or rng.random() < 0.25:
        return Variable(rng.choice("ABC"))
    kind = rng.choice([Not, And, Or])
    if kind is Not:
        return Not(random_term(rng, depth - 1))
    return kind(random_term(rng, depth - 1), random_term(rng, depth - 1))


def random_sequent(rng):
    return Sequent(
        [random_term(rng, 3) for _ in range(rng.randint(0, 3))],
        [random_term(rng, 3) for _ in range(rng.randint(0, 3))],
    )


def evaluate(term, assignment):
    if isinstance(term, Variable):
        return assignment[term.name]
    if isinstance(term, Not):
        return not evaluate(term.child, assignment)
    if isinstance(term, And):
        return evaluate(term.left, assignment) and evaluate(term.right, assignment)
    return evaluate(term.left, assignment) or evaluate(term.right, assignment)


def is_valid(sequent):
    """Truth-table check: every assignment making the left true makes some right term true."""
    names = sorted(sequent.variables())
    for bits in range(2 ** len(names)):
        assignment = {name: bool(bits >> i & 1) for i, name in enumerate(names)}
        if (all(evaluate(t, assignment) for t in sequent.left)
                and not any(evaluate(t, assignment) for t in sequent.right)):
            return False
    return True


SEQUENTS = [random_sequent(random.Random(seed)) for seed in range(60)]


class TestProperties:
    @pytest.mark.parametrize("sequent", SEQUENTS, ids=str)
    def test_format_parse_idempotent(self, sequent):
        for name in ("sequent", "ascii"):
            handler = get_format_handler(name)
            assert handler.parse_string(handler.format_sequent(sequent)) == sequent

    @pytest.mark.parametrize("sequent", SEQUENTS, ids=str)
    def test_total_and_sound(self, sequent):
        """The search always returns a tree for the input and agrees with truth tables."""
        root = prove(sequent)
        assert root.sequent == sequent
        assert root.is_proved == is_valid(sequent)

    @pytest.mark.parametrize("sequent", SEQUENTS, ids=str)
    def test_fail_leaves_are_atomic(self, sequent):
        """A branch fails only when it holds distinct variables and nothing else."""
        for failed in prove(sequent).failed_sequents():
            assert all(isinstance(t, Variable) for t in failed.left + failed.right)
            left_names = {t.name for t in failed.left}
            assert not any(t.name in left_names for t in failed.right)

    @pytest.mark.parametrize("sequent", SEQUENTS, ids=str)
    def test_closed_root_iff_axiom(self, sequent):
        exact_axiom = (len(sequent.left) == 1 and len(sequent.right) == 1
                       and isinstance(sequent.left[0], Variable)
                       and sequent.left[0] == sequent.right[0])
        assert prove(sequent).is_closed == exact_axiom


class TestHighLevelAPI:
    def test_version(self):
        assert seqprover.__version__ == "0.1.0"

    def test_parse(self):
        assert parse("A > A") == Sequent([Variable("A")], [Variable("A")])

    def test_prove_string_input(self):
        assert prove("A ∧ B ⊦ B ∧ A").is_proved
        assert not prove("A ⊦ B").is_proved

    def test_prove_raises_syntax_error(self):
        with pytest.raises(SequentSyntaxError):
            prove(")A ⊦ A")

    def test_prove_string_payload(self):
        payload = prove_string("A ⊦ B")
        assert payload["ok"] is True
        assert payload["sequent"] == "A ⊦ B"
        assert payload["proved"] is False
        assert payload["derivation"]["children"] == [{"fail": True}]

    def test_prove_string_error(self):
        assert prove_string(")A ⊦ A") == {
            "ok": False,
            "error": {"message": "Binary operator without second operand", "position": 0},
        }

    def test_unknown_search(self):
        with pytest.raises(ValueError):
            prove("A ⊦ A", search="tableau")
