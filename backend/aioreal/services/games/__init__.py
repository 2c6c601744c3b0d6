"""Game domain services: scoring, round timer and session state machine.

This package contains pure(ish) domain logic that should be imported by
HTTP routes and socket handlers, keeping transport concerns separated
from core game mechanics. ``scoring``, ``timer`` and ``sequencer`` have no
Flask dependency; ``image_pool``, ``ranking``, ``hub`` and ``scheduler``
bind them to the database and the Socket.IO server.
"""
