"""
CipherStep Ciphers
===================

One module per cipher. Each class validates its key at construction and
exposes ``encrypt`` / ``decrypt`` plus ``encryption_steps`` /
``decryption_steps`` (Base64 also offers ``encode`` / ``decode``).
"""

from cipherstep.ciphers.base64_codec import Base64Codec
from cipherstep.ciphers.caesar import CaesarCipher
from cipherstep.ciphers.hill import HillCipher
from cipherstep.ciphers.monoalphabetic import MonoalphabeticCipher
from cipherstep.ciphers.playfair import PlayfairCipher
from cipherstep.ciphers.transposition import TranspositionCipher
from cipherstep.ciphers.vigenere import VigenereCipher
from cipherstep.ciphers.xor import XORCipher

__all__ = [
    "Base64Codec",
    "CaesarCipher",
    "HillCipher",
    "MonoalphabeticCipher",
    "PlayfairCipher",
    "TranspositionCipher",
    "VigenereCipher",
    "XORCipher",
]
