"""
Language-specific chaincode generators.

This module contains generators for the supported chaincode languages.
"""

from .go import ChaincodeGenerator, create_chaincode_generator

__all__ = ["ChaincodeGenerator", "create_chaincode_generator"]
