"""Constants for midimessage.

This package contains two sets of constants:

- ``midimessage.constants.velocity`` - Default and boundary velocities used by the note factories
- ``midimessage.constants.data`` - Byte masks, channel count and the pitch-bend range
"""
