"""Service modules"""
from .client import ProtocolClient

__all__ = ["ProtocolClient"]
