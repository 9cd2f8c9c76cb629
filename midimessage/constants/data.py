"""Status and data byte layout constants.

A MIDI message is a status byte followed by zero, one or two data bytes.
Data bytes carry 7 bits; 14-bit values (pitch bend, song position) are split
across two data bytes, least significant 7 bits first.
"""

# Status byte
STATUS_MASK = 0xF0              # High nibble: channel message category
CHANNEL_MASK = 0x0F             # Low nibble: channel
SYSTEM_MASK = 0xF8              # Top five bits: system common / real-time split
MIDI_CHANNELS = 16

# Data bytes
DATA_MASK = 0x7F
DATA_BITS = 7
BYTE_MASK = 0xFF

# Message buffer
MAX_MESSAGE_LENGTH = 3

# 14-bit values
MAX_14BIT = 0x3FFF

# Pitch bend is a 14-bit value centred on 0x2000
PITCH_BEND_CENTER = 0x2000
MIN_PITCH_BEND = -0x2000        # -8192
MAX_PITCH_BEND = 0x1FFF         # 8191
