"""
Shared constants and helper utilities.

Centralizes rig defaults, the colour palette, and small stateless helpers
used across the wmm_sim package.
"""
