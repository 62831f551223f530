"""Symmetric XOR, mask and CBC ciphers, and tools for cracking repeating-key XOR."""

__version__ = "0.1.0"