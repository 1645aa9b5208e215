"""Tests for derivation tree serialization."""

import json

from seqprover.core.exceptions import SequentSyntaxError
from seqprover.fileformats.parser import parse_sequent_string
from seqprover.core.logic import ASCII_GLYPHS
from seqprover.proofs import (
    SequentNode, FailLeaf,
    derivation_to_dict, derivation_from_dict, error_to_dict,
    derivation_to_json, derivation_from_json,
    save_derivation, load_derivation
)
from seqprover.search import BackwardSearch


def prove(text):
    return BackwardSearch().prove(parse_sequent_string(text))


class TestDerivationDict:
    """Test the display encoding handed to renderers."""

    def test_failed_derivation(self):
        assert derivation_to_dict(prove("A ⊦ B")) == {
            "sequent": "A ⊦ B",
            "rule": "fail",
            "closed": False,
            "children": [{"fail": True}],
        }

    def test_nested_derivation(self):
        data = derivation_to_dict(prove("⊦ A ∨ ¬A"))
        assert data["sequent"] == "∅ ⊦ A ∨ (¬A)"
        child = data["children"][0]
        assert child["sequent"] == "∅ ⊦ A, ¬A"
        leaf = child["children"][0]
        assert leaf == {"sequent": "A ⊦ A", "rule": "axiom", "closed": True, "children": []}

    def test_json_compatible(self):
        data = derivation_to_dict(prove("A ∨ B ⊦ A ∧ B"))
        assert json.loads(json.dumps(data)) == data

    def test_from_dict(self):
        root = prove("A ∨ B ⊦ A ∧ B")
        assert derivation_from_dict(derivation_to_dict(root)) == root

    def test_from_ascii_dict(self):
        """Display strings in ASCII glyphs, empty sides included, load back."""
        root = prove("⊦ A ∨ !A")
        assert derivation_from_dict(derivation_to_dict(root, ASCII_GLYPHS)) == root

    def test_error_dict(self):
        error = SequentSyntaxError("Blank term", 3)
        assert error_to_dict(error) == {"message": "Blank term", "position": 3}


class TestDerivationJSON:
    """Test the full encoding, which can be loaded back."""

    def test_round_trip(self):
        root = prove("A ∨ B ⊦ A ∧ B")
        restored = derivation_from_json(derivation_to_json(root))

        assert isinstance(restored, SequentNode)
        assert restored == root
        assert restored.failed_sequents() == root.failed_sequents()

    def test_fail_leaf_encoding(self):
        data = json.loads(derivation_to_json(prove("A ⊦ B")))
        assert data["_type"] == "SequentNode"
        assert data["children"] == [{"_type": "FailLeaf"}]
        assert data["sequent"]["_type"] == "Sequent"

    def test_save_and_load(self, tmp_path):
        root = prove("A ∧ B ⊦ B ∧ A")
        path = tmp_path / "proof.json"

        save_derivation(root, path)
        assert path.exists()
        assert load_derivation(path) == root

    def test_closed_leaf_round_trip(self):
        root = prove("A ⊦ A")
        restored = derivation_from_json(derivation_to_json(root))
        assert restored.is_closed
        assert restored.rule == "axiom"
        assert not isinstance(restored, FailLeaf)
