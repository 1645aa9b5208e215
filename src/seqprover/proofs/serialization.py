"""JSON serialization for derivation trees.

Two encodings are supported. ``derivation_to_dict`` produces the nested
structure handed to a renderer: sequents as display strings, fail leaves as
``{"fail": true}``. ``derivation_to_json`` keeps the full term structure
(via CoreJSONEncoder) so a tree can be loaded back exactly.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from seqprover.core.exceptions import SequentSyntaxError
from seqprover.core.serialization import CoreJSONEncoder, decode_core_object
from seqprover.fileformats.parser import parse_sequent_string
from .derivation import SequentNode, FailLeaf, DerivationNode


def derivation_to_dict(node: DerivationNode, glyphs=None) -> Dict[str, Any]:
    """Convert a derivation tree to nested dictionaries for display."""
    if isinstance(node, FailLeaf):
        return {"fail": True}
    return {
        "sequent": node.sequent.to_string(glyphs=glyphs),
        "rule": node.rule,
        "closed": node.is_closed,
        "children": [derivation_to_dict(child, glyphs) for child in node.children],
    }


def derivation_from_dict(data: Dict[str, Any]) -> DerivationNode:
    """Rebuild a derivation tree from its display encoding.

    Sequents are re-parsed from their display strings, so either glyph set
    is accepted.
    """
    if data.get("fail"):
        return FailLeaf()
    return SequentNode(
        parse_sequent_string(data["sequent"]),
        tuple(derivation_from_dict(child) for child in data["children"]),
        data.get("rule"),
    )


def error_to_dict(error: SequentSyntaxError) -> Dict[str, Any]:
    """Structured form of a syntax error: message and character offset."""
    return error.to_dict()


class ProofJSONEncoder(CoreJSONEncoder):
    """JSON encoder for derivation trees."""

    def default(self, obj):
        if isinstance(obj, FailLeaf):
            return {"_type": "FailLeaf"}

        elif isinstance(obj, SequentNode):
            return {
                "_type": "SequentNode",
                "sequent": obj.sequent,
                "rule": obj.rule,
                "children": list(obj.children)
            }

        return super().default(obj)


def decode_proof_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to derivation and core objects."""
    obj_type = dct.get("_type")

    if obj_type == "FailLeaf":
        return FailLeaf()

    elif obj_type == "SequentNode":
        return SequentNode(dct["sequent"], tuple(dct["children"]), dct.get("rule"))

    return decode_core_object(dct)


# Convenience functions

def derivation_to_json(node: SequentNode, indent: int = 2) -> str:
    """Convert a derivation tree to JSON string."""
    return json.dumps(node, cls=ProofJSONEncoder, indent=indent, ensure_ascii=False)


def derivation_from_json(json_str: str) -> SequentNode:
    """Create a derivation tree from JSON string."""
    return json.loads(json_str, object_hook=decode_proof_object)


def save_derivation(node: SequentNode, file_path: Union[str, Path]) -> None:
    """Save a derivation tree to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(node, f, cls=ProofJSONEncoder, indent=2, ensure_ascii=False)


def load_derivation(file_path: Union[str, Path]) -> SequentNode:
    """Load a derivation tree from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f, object_hook=decode_proof_object)
