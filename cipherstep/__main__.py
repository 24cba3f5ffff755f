"""
CipherStep Module Entry Point
==============================

Allows running the CipherStep CLI via: python -m cipherstep
"""

from cipherstep.cli import main

if __name__ == "__main__":
    main()
