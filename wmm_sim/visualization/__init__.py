"""
Scene composition, rendering, and the live viewer.

Provides the pure scene composer, the drawing-surface protocol with NumPy
and Pygame implementations, the event-driven canvas, and a Pygame window
for interactive use.
"""
