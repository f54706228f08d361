"""
Wheeled Mobile Manipulator (WMM) simulation.

A planar visualisation of a mobile base that slides along a ground line and
carries a 3-link arm with a two-finger gripper.  Provides closed-form inverse
kinematics, forward kinematics and scene composition, a click-driven base
controller, headless and Pygame renderers, and a Gymnasium-compatible
environment wrapper.

Modules:
    robots: Rig data types, kinematics, and the base position controller.
    visualization: Scene composition, drawing surfaces, and the live viewer.
    envs: Gymnasium-compatible headless environment and its configuration.
    utils: Shared constants and small stateless helpers.
"""

__version__ = "0.1.0"
