"""
Makes "py -m lukas script.rpn" work just like "lukas script.rpn".
"""
from .cmdline import main

main()
