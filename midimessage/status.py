"""Status byte classification.

Every MIDI message starts with a status byte (top bit set). The status byte
places the message in one of three categories:

- **Channel messages** (0x80-0xEF): the high nibble is the message type, the
  low nibble is the channel.
- **System common messages** (0xF0-0xF7): the whole byte is the message type.
- **System real-time messages** (0xF8-0xFF): single byte timing and transport
  messages.

Bytes 0x00-0x7F are data bytes. Every predicate here returns False for them
and every length lookup returns 0, so classification never raises::

    import midimessage.status as status

    status.is_channel_message(0x93)                                   # True
    status.is_channel_message_type(status.ChannelMessage.NOTE_ON, 0x93)  # True
    status.channel_message_length(status.ChannelMessage.NOTE_ON)      # 2
"""

import enum
import typing

import midimessage.constants.data


class ChannelMessage (enum.IntEnum):

	"""
	Channel (voice) message types. The channel occupies the low nibble.
	"""

	NOTE_OFF = 0x80
	NOTE_ON = 0x90
	KEY_PRESSURE = 0xA0
	CONTROL_CHANGE = 0xB0
	PROGRAM_CHANGE = 0xC0
	CHANNEL_PRESSURE = 0xD0
	PITCH_BEND = 0xE0


class SystemMessage (enum.IntEnum):

	"""
	System common message types. 0xF4 and 0xF5 are reserved and have no member.
	"""

	SYSTEM_EXCLUSIVE = 0xF0
	TIME_CODE = 0xF1
	SONG_POSITION = 0xF2
	SONG_SELECT = 0xF3
	TUNE_REQUEST = 0xF6
	END_OF_EXCLUSIVE = 0xF7


class RealTimeMessage (enum.IntEnum):

	"""
	System real-time message types. 0xF9 and 0xFD are reserved and have no member.
	"""

	TICK = 0xF8
	START = 0xFA
	CONTINUE = 0xFB
	STOP = 0xFC
	ACTIVE_SENSING = 0xFE
	RESET = 0xFF


# Data bytes following the status byte. SYSTEM_EXCLUSIVE is variable length on
# the wire; the payload belongs to whoever owns the byte stream, so it reports 0.

CHANNEL_MESSAGE_LENGTHS: typing.Dict[int, int] = {
	ChannelMessage.NOTE_OFF: 2,
	ChannelMessage.NOTE_ON: 2,
	ChannelMessage.KEY_PRESSURE: 2,
	ChannelMessage.CONTROL_CHANGE: 2,
	ChannelMessage.PROGRAM_CHANGE: 1,
	ChannelMessage.CHANNEL_PRESSURE: 1,
	ChannelMessage.PITCH_BEND: 2,
}

SYSTEM_MESSAGE_LENGTHS: typing.Dict[int, int] = {
	SystemMessage.SYSTEM_EXCLUSIVE: 0,
	SystemMessage.TIME_CODE: 1,
	SystemMessage.SONG_POSITION: 2,
	SystemMessage.SONG_SELECT: 1,
	SystemMessage.TUNE_REQUEST: 0,
	SystemMessage.END_OF_EXCLUSIVE: 0,
}

CLOCK_MESSAGES: typing.FrozenSet[int] = frozenset({
	RealTimeMessage.TICK,
	RealTimeMessage.START,
	RealTimeMessage.CONTINUE,
	RealTimeMessage.STOP,
})


# ── Channel messages ─────────────────────────────────────────────────

def is_channel_message (status: int) -> bool:

	"""
	Return True if the status byte is a channel message (0x80-0xEF).
	"""

	category = status & midimessage.constants.data.STATUS_MASK

	return category >= 0x80 and category < 0xF0


def is_channel_message_type (kind: ChannelMessage, status: int) -> bool:

	"""
	Return True if the status byte is the given channel message type on any channel.
	"""

	return (status & midimessage.constants.data.STATUS_MASK) == kind


def channel_message (status: int) -> ChannelMessage:

	"""
	Return the channel message type of a status byte, ignoring the channel.

	Raises ``ValueError`` if the status byte is not a channel message.
	"""

	return ChannelMessage(status & midimessage.constants.data.STATUS_MASK)


def channel_message_length (kind: int) -> int:

	"""
	Return the number of data bytes that follow a channel message type.

	Unknown values return 0.
	"""

	return CHANNEL_MESSAGE_LENGTHS.get(kind, 0)


# ── System common messages ───────────────────────────────────────────

def is_system_message (status: int) -> bool:

	"""
	Return True if the status byte is a system common message (0xF0-0xF7).
	"""

	return (status & midimessage.constants.data.SYSTEM_MASK) == 0xF0


def is_system_message_type (kind: SystemMessage, status: int) -> bool:

	"""
	Return True if the status byte is exactly the given system common message.
	"""

	return status == kind


def system_message (status: int) -> SystemMessage:

	"""
	Return the system common message type of a status byte.

	Raises ``ValueError`` for reserved (0xF4, 0xF5) and non-system status bytes.
	"""

	return SystemMessage(status)


def system_message_length (kind: int) -> int:

	"""
	Return the number of data bytes that follow a system common message.

	Reserved and unknown values return 0.
	"""

	return SYSTEM_MESSAGE_LENGTHS.get(kind, 0)


# ── System real-time messages ────────────────────────────────────────

def is_real_time_message (status: int) -> bool:

	"""
	Return True if the status byte is a system real-time message (0xF8-0xFF).
	"""

	return (status & midimessage.constants.data.SYSTEM_MASK) == 0xF8


def is_real_time_message_type (kind: RealTimeMessage, status: int) -> bool:

	"""
	Return True if the status byte is exactly the given real-time message.
	"""

	return status == kind


def real_time_message (status: int) -> RealTimeMessage:

	"""
	Return the real-time message type of a status byte.

	Raises ``ValueError`` for reserved (0xF9, 0xFD) and non-real-time status bytes.
	"""

	return RealTimeMessage(status)


def is_clock_message (status: int) -> bool:

	"""
	Return True for the timing and transport subset of real-time messages.

	Tick, Start, Continue and Stop qualify. Active Sensing and Reset do not.
	"""

	return is_real_time_message(status) and status in CLOCK_MESSAGES


# ── Any status byte ──────────────────────────────────────────────────

def data_length (status: int) -> int:

	"""
	Return the number of data bytes implied by any status byte.

	Channel messages are looked up by type, system common messages by the full
	byte. Real-time messages, reserved values and data bytes (below 0x80)
	return 0.
	"""

	if is_channel_message(status):
		return channel_message_length(status & midimessage.constants.data.STATUS_MASK)

	if is_system_message(status):
		return system_message_length(status)

	return 0
