"""
ROT13 Cipher Plugin - Example for the Cipher Engine Plugin System

This file demonstrates how to create a custom cipher plugin.
To create your own cipher:

1. Create a new .py file in the plugins/ directory
2. Use the base classes and decorator (they're injected automatically)
3. Create a class extending CipherStrategy (or an existing cipher)
4. Use the @register_cipher decorator
5. Add an entry to manifest.json with the file name and cipher name

CipherStrategy, CaesarCipher, register_cipher and log_warn are made available
when this module is loaded by the plugin system.
"""

# These are injected by the plugin loader - no explicit import needed
# from cipher_engine import CaesarCipher, register_cipher


@register_cipher
class Rot13Cipher(CaesarCipher):
    """
    ROT13 substitution cipher.

    A Caesar cipher pinned to a shift of 13. Since 13 is half the
    alphabet, encrypt and decrypt are the same operation.
    """

    name = "rot13"
    description = "Caesar cipher fixed at shift 13 (example plugin)."

    def __init__(self):
        super().__init__(13)

    @classmethod
    def from_options(cls, shift=None, key=None):
        if shift is not None:
            log_warn("rot13 ignores --shift")
        return cls()

    def __repr__(self):
        return "Rot13Cipher()"
