"""
Go chaincode generator module.

Generates Hyperledger Fabric smart contracts (contractapi) in Go.
"""

from .generator import ChaincodeGenerator, create_chaincode_generator, generate_chaincode
from .emitters import BlockEmitter, EmitContext
from .naming import create_go_name_checker
from .samples import synthesize_sample_value
from .types import FunctionParams, GoTypeMapper, build_function_params

__all__ = [
    "ChaincodeGenerator",
    "BlockEmitter",
    "EmitContext",
    "FunctionParams",
    "GoTypeMapper",
    "build_function_params",
    "create_chaincode_generator",
    "create_go_name_checker",
    "generate_chaincode",
    "synthesize_sample_value",
]
