"""Conversion between ``MidiMessage`` and ``mido.Message``.

midimessage has no transport of its own. Ports opened with mido send and
receive ``mido.Message`` objects, so these two functions sit at that boundary::

	import mido
	import midimessage.mido_bridge

	port = mido.open_output("My Synth")
	port.send(midimessage.mido_bridge.to_mido(MidiMessage.make_note_on(0, 60)))

System Exclusive does not fit in a three byte message and is rejected in both
directions.
"""

import logging
import typing

import mido

import midimessage.message


logger = logging.getLogger(__name__)


def to_mido (message: midimessage.message.MidiMessage) -> mido.Message:

	"""
	Convert a message to a ``mido.Message`` for sending on a mido port.

	Raises ``ValueError`` for a default (empty) message, and when mido cannot
	parse the stored bytes: a status byte mido has no type for, a lone SysEx
	start, a length that does not match the status byte, or a data byte
	above 127.
	"""

	if not message.length:
		logger.warning("Cannot convert an empty MidiMessage to a mido message")
		raise ValueError("An empty MidiMessage has no wire form")

	try:
		converted = mido.Message.from_bytes(list(message.raw))

	except ValueError as e:
		logger.warning(f"Cannot convert {message!r} to a mido message: {e}")
		raise

	logger.debug(f"Converted {message!r} to {converted}")

	return converted


def from_mido (message: typing.Any) -> midimessage.message.MidiMessage:

	"""
	Convert a ``mido.Message`` (for example from an input port callback).

	Raises ``ValueError`` for meta messages and SysEx, which have no three byte form.
	"""

	if getattr(message, "is_meta", False):
		raise ValueError(f"Meta messages have no MIDI wire form: {message}")

	if message.type == "sysex":
		raise ValueError("SysEx payloads do not fit in a MidiMessage")

	converted = midimessage.message.MidiMessage.from_bytes(message.bytes())

	logger.debug(f"Converted {message} to {converted!r}")

	return converted
