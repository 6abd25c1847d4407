"""
Web application package for the Scacchi engine.

Provides a FastAPI-based REST API for asking the engine for a move or a
static evaluation of a FEN position.
"""
