"""
Rig description, kinematics, and base control for the mobile manipulator.

Provides the immutable rig data types, closed-form inverse kinematics,
forward kinematics in arm and screen frames, and the controller that
owns the base's horizontal position.
"""
