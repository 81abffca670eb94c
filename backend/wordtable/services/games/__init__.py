"""Game domain services: rule engines, the session controller and storage.

Engines here are pure functions of (snapshot, move, randomness). HTTP
routes and socket handlers import ``session`` and ``store`` and keep
transport concerns out of the game mechanics.
"""
