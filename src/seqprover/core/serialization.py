"""JSON serialization for core objects."""

import json
from pathlib import Path
from typing import Dict, Any, Union

from .logic import Variable, Not, And, Or, Sequent


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for terms and sequents."""

    def default(self, obj):
        # Variables
        if isinstance(obj, Variable):
            return {
                "_type": "Variable",
                "name": obj.name
            }

        # Negation
        elif isinstance(obj, Not):
            return {
                "_type": "Not",
                "child": obj.child
            }

        # Binary connectives
        elif isinstance(obj, (And, Or)):
            return {
                "_type": type(obj).__name__,
                "left": obj.left,
                "right": obj.right
            }

        # Sequents
        elif isinstance(obj, Sequent):
            return {
                "_type": "Sequent",
                "left": list(obj.left),
                "right": list(obj.right)
            }

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to core objects."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Variable":
        return Variable(dct["name"])

    elif obj_type == "Not":
        return Not(dct["child"])

    elif obj_type == "And":
        return And(dct["left"], dct["right"])

    elif obj_type == "Or":
        return Or(dct["left"], dct["right"])

    elif obj_type == "Sequent":
        return Sequent(dct["left"], dct["right"])

    return dct


# Convenience functions

def sequent_to_json(sequent: Sequent, indent: int = 2) -> str:
    """Convert a Sequent to JSON string."""
    return json.dumps(sequent, cls=CoreJSONEncoder, indent=indent)


def sequent_from_json(json_str: str) -> Sequent:
    """Create a Sequent from JSON string."""
    return json.loads(json_str, object_hook=decode_core_object)


def save_sequent(sequent: Sequent, file_path: Union[str, Path]) -> None:
    """Save a Sequent to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(sequent, f, cls=CoreJSONEncoder, indent=2)


def load_sequent(file_path: Union[str, Path]) -> Sequent:
    """Load a Sequent from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f, object_hook=decode_core_object)
