"""
Web application package for the chess opponent.

Provides a FastAPI-based JSON API that a browser board calls to play
against the opponent at a chosen difficulty.
"""
