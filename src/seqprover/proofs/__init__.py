"""
Derivation trees and their serialization.
"""

from .derivation import SequentNode, FailLeaf, DerivationNode, FAIL
from .serialization import (
    ProofJSONEncoder, decode_proof_object,
    derivation_to_dict, derivation_from_dict, error_to_dict,
    derivation_to_json, derivation_from_json,
    save_derivation, load_derivation
)

__all__ = [
    'SequentNode', 'FailLeaf', 'DerivationNode', 'FAIL',
    'ProofJSONEncoder', 'decode_proof_object',
    'derivation_to_dict', 'derivation_from_dict', 'error_to_dict',
    'derivation_to_json', 'derivation_from_json',
    'save_derivation', 'load_derivation'
]
