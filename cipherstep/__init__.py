"""
CipherStep -- Classical Ciphers, One Step at a Time
====================================================

Educational library of classical ciphers and encodings. Every transform
is available in two forms: a plain one that returns the result, and a
traced one that returns the ordered list of steps a student would work
through by hand.

Modules:
    - cipherstep.ciphers: Caesar, Monoalphabetic, Vigenère, Playfair, Hill,
      Columnar Transposition, XOR and Base64
    - cipherstep.core.models: Pydantic data models (StepInfo, results)
    - cipherstep.core.tracer: Step trace builder
    - cipherstep.core.engine: Facade used by the CLI
    - cipherstep.output: Console and report output
    - cipherstep.cli: Click-based command-line interface

References:
    - Kahn, D. (1996). The Codebreakers. Scribner.
    - Singh, S. (1999). The Code Book. Fourth Estate.
    - Stinson, D. R. (2006). Cryptography: Theory and Practice (3rd ed.).
"""

__version__ = "1.0.0"
__tool_name__ = "cipherstep"
