"""
midimessage - a MIDI 1.0 message value type for Python.

A ``MidiMessage`` holds one message: a status byte and up to two data bytes.
It classifies the status byte into channel, system common or system real-time
categories, reads each category's fields (note, velocity, controller, pitch
bend, song position, ...), and builds messages from those fields.

- **Decode.** ``MidiMessage(0x93, 60, 100)`` or
  ``MidiMessage.from_bytes(data)`` wraps bytes you already have.
- **Classify.** ``msg.is_note_on()``, ``msg.is_clock_message()``, or the
  module level predicates in ``midimessage.status`` that work on a bare
  status byte.
- **Read.** ``msg.channel``, ``msg.note``, ``msg.velocity``,
  ``msg.pitch_bend`` (signed, 0 is centre), ``msg.song_position``.
- **Encode.** ``MidiMessage.make_note_on(channel, note, velocity)`` and the
  other ``make_*`` factories. ``bytes(msg)`` gives the wire bytes.
- **Interop.** ``midimessage.mido_bridge`` converts to and from
  ``mido.Message`` for sending on real or virtual ports.

There is no running status handling and no SysEx payload buffering: a
``MidiMessage`` is always one already delimited message.

Package-level exports: ``MidiMessage``, ``ChannelMessage``, ``SystemMessage``, ``RealTimeMessage``.
"""

import midimessage.message
import midimessage.status


MidiMessage = midimessage.message.MidiMessage
ChannelMessage = midimessage.status.ChannelMessage
SystemMessage = midimessage.status.SystemMessage
RealTimeMessage = midimessage.status.RealTimeMessage
