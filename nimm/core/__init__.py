"""Core gameplay primitives (board, selection, turns, input events).

Kept free of FastAPI concerns so it can be reused by the session loop, renderer, and tests.
"""
