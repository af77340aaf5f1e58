"""Chaincode Builder.

Turns a block project (placed operation blocks plus an asset schema) into
Hyperledger Fabric chaincode written in Go.
"""

from .codegen import GenerationResult, generate_chaincode, generate_code, generate_from_project
from .project import (
    BLOCK_PALETTE,
    ChaincodeProject,
    ProjectError,
    load_project,
    save_project,
    starter_project,
)

__version__ = "0.1.0"

__all__ = [
    "BLOCK_PALETTE",
    "ChaincodeProject",
    "GenerationResult",
    "ProjectError",
    "generate_chaincode",
    "generate_code",
    "generate_from_project",
    "load_project",
    "save_project",
    "starter_project",
]
