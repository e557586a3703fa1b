"""
Atbash Cipher Plugin - Mirrors the alphabet (A<->Z, b<->y)

A parameterless substitution: each letter is replaced by the letter at
the same distance from the other end of its alphabet. Case is kept and
anything that is not an ASCII letter passes through untouched.
"""


def _mirror(char):
    if 'a' <= char <= 'z':
        return chr(ord('z') - (ord(char) - ord('a')))
    if 'A' <= char <= 'Z':
        return chr(ord('Z') - (ord(char) - ord('A')))
    return char


@register_cipher
class AtbashCipher(CipherStrategy):
    """Atbash is its own inverse: encrypt and decrypt share one mapping."""

    name = "atbash"
    description = "Mirrors the alphabet, A<->Z (example plugin)."

    def encrypt(self, text: str) -> str:
        return "".join(_mirror(c) for c in text)

    def decrypt(self, text: str) -> str:
        return self.encrypt(text)

    def __repr__(self):
        return "AtbashCipher()"
