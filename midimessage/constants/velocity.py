"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). These constants are the defaults
used by ``MidiMessage.make_note_on()`` and ``MidiMessage.make_note_off()``.
"""

# Factory defaults
DEFAULT_NOTE_ON_VELOCITY = 127     # Full strength
DEFAULT_NOTE_OFF_VELOCITY = 0      # Release velocity most receivers ignore

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127
