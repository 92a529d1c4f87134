"""Room and round services.

This package contains the in-memory game logic that the Socket.IO handlers
call into, keeping transport concerns separated from the room lifecycle and
round resolution.
"""
