import typing

import midimessage.constants.data
import midimessage.constants.velocity
import midimessage.status


class MidiMessage:

	"""
	A single MIDI message: a status byte and up to two data bytes.

	The bytes live in a fixed three slot buffer next to an explicit length.
	Build a message from bytes you already have (decode) or from one of the
	``make_*`` factories (encode)::

		msg = MidiMessage(0x93, 60, 100)
		msg.is_note_on()     # True
		msg.channel          # 3
		msg.note             # 60

		msg = MidiMessage.make_pitch_bend(channel=0, value=-1)
		msg.raw.hex()        # 'e07f3f'

	Field accessors do not check the category. Reading ``velocity`` from a
	program change returns whatever is stored in that slot, so test the
	category first with the matching ``is_*`` method.

	The stored length is taken from the number of bytes given, not from the
	status byte. ``MidiMessage(0xC0, 5, 9)`` stores three bytes even though a
	program change carries one data byte. Use
	:func:`midimessage.status.data_length` to find the length a status implies.

	A default ``MidiMessage()`` has length 0 and no meaningful fields.
	"""

	__slots__ = ("_raw", "_length")

	_raw: bytes
	_length: int

	def __init__ (self, *data: int) -> None:

		"""
		Store up to three bytes. Each value is truncated to 8 bits.

		Raises ``TypeError`` when given more than three bytes.
		"""

		if len(data) > midimessage.constants.data.MAX_MESSAGE_LENGTH:
			raise TypeError(f"MidiMessage takes at most {midimessage.constants.data.MAX_MESSAGE_LENGTH} bytes ({len(data)} given)")

		padded = [value & midimessage.constants.data.BYTE_MASK for value in data]
		padded += [0] * (midimessage.constants.data.MAX_MESSAGE_LENGTH - len(padded))

		object.__setattr__(self, "_raw", bytes(padded))
		object.__setattr__(self, "_length", len(data))

	@staticmethod
	def from_bytes (data: typing.Iterable[int]) -> "MidiMessage":

		"""
		Build a message from one already delimited message's bytes.

		Accepts ``bytes``, ``bytearray`` or any sequence of ints. Raises
		``ValueError`` unless there are between one and three bytes.
		"""

		values = list(data)

		if not values or len(values) > midimessage.constants.data.MAX_MESSAGE_LENGTH:
			raise ValueError(f"A MIDI message is 1 to {midimessage.constants.data.MAX_MESSAGE_LENGTH} bytes, got {len(values)}")

		return MidiMessage(*values)

	def __setattr__ (self, name: str, value: typing.Any) -> None:
		raise AttributeError(f"MidiMessage is immutable (cannot set {name!r})")

	def __delattr__ (self, name: str) -> None:
		raise AttributeError(f"MidiMessage is immutable (cannot delete {name!r})")

	def __reduce__ (self) -> typing.Tuple[typing.Any, ...]:

		# copy and pickle rebuild through __init__, since __setattr__ is blocked.
		return (MidiMessage, tuple(self.raw))

	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, MidiMessage):
			return NotImplemented

		return self.raw == other.raw

	def __hash__ (self) -> int:
		return hash(self.raw)

	def __len__ (self) -> int:
		return self._length

	def __bytes__ (self) -> bytes:
		return self.raw

	def __repr__ (self) -> str:

		if not self._length:
			return "MidiMessage()"

		return f"MidiMessage({', '.join(f'0x{b:02X}' for b in self.raw)})"

	# ── Message data ─────────────────────────────────────────────────

	@property
	def status (self) -> int:
		return self._raw[0]

	@property
	def data0 (self) -> int:
		return self._raw[1]

	@property
	def data1 (self) -> int:
		return self._raw[2]

	@property
	def raw (self) -> bytes:

		"""
		The stored bytes, ``length`` long. Send these verbatim.
		"""

		return self._raw[:self._length]

	@property
	def length (self) -> int:
		return self._length

	# ── Channel messages ─────────────────────────────────────────────

	def is_channel_message (self) -> bool:
		return midimessage.status.is_channel_message(self.status)

	def channel_message (self) -> midimessage.status.ChannelMessage:

		"""
		Return the channel message type. Raises ``ValueError`` for other categories.
		"""

		return midimessage.status.channel_message(self.status)

	@property
	def channel (self) -> int:
		return self.status & midimessage.constants.data.CHANNEL_MASK

	def is_note_off (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.NOTE_OFF, self.status)

	def is_note_on (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.NOTE_ON, self.status)

	@property
	def note (self) -> int:

		"""
		Note number of a note on, note off or key pressure message.
		"""

		return self.data0

	@property
	def velocity (self) -> int:
		return self.data1

	def is_key_pressure (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.KEY_PRESSURE, self.status)

	@property
	def key_pressure (self) -> int:
		return self.data1

	def is_control_change (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.CONTROL_CHANGE, self.status)

	@property
	def controller_number (self) -> int:
		return self.data0

	@property
	def controller_value (self) -> int:
		return self.data1

	def is_program_change (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.PROGRAM_CHANGE, self.status)

	@property
	def program_number (self) -> int:
		return self.data0

	def is_channel_pressure (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.CHANNEL_PRESSURE, self.status)

	@property
	def channel_pressure (self) -> int:
		return self.data0

	def is_pitch_bend (self) -> bool:
		return midimessage.status.is_channel_message_type(midimessage.status.ChannelMessage.PITCH_BEND, self.status)

	@property
	def pitch_bend (self) -> int:

		"""
		Signed pitch bend, -8192 to 8191 with 0 at the centre.
		"""

		return (self.data1 << midimessage.constants.data.DATA_BITS | self.data0) - midimessage.constants.data.PITCH_BEND_CENTER

	# ── System common messages ───────────────────────────────────────

	def is_system_message (self) -> bool:
		return midimessage.status.is_system_message(self.status)

	def system_message (self) -> midimessage.status.SystemMessage:

		"""
		Return the system common message type. Raises ``ValueError`` for reserved values.
		"""

		return midimessage.status.system_message(self.status)

	def is_system_exclusive (self) -> bool:
		return midimessage.status.is_system_message_type(midimessage.status.SystemMessage.SYSTEM_EXCLUSIVE, self.status)

	def is_time_code (self) -> bool:
		return midimessage.status.is_system_message_type(midimessage.status.SystemMessage.TIME_CODE, self.status)

	def is_song_position (self) -> bool:
		return midimessage.status.is_system_message_type(midimessage.status.SystemMessage.SONG_POSITION, self.status)

	def is_song_select (self) -> bool:
		return midimessage.status.is_system_message_type(midimessage.status.SystemMessage.SONG_SELECT, self.status)

	def is_tune_request (self) -> bool:
		return midimessage.status.is_system_message_type(midimessage.status.SystemMessage.TUNE_REQUEST, self.status)

	def is_end_of_exclusive (self) -> bool:
		return midimessage.status.is_system_message_type(midimessage.status.SystemMessage.END_OF_EXCLUSIVE, self.status)

	@property
	def song_position (self) -> int:

		"""
		Song position in MIDI beats (sixteenth notes), unsigned 14-bit.
		"""

		return self.data1 << midimessage.constants.data.DATA_BITS | self.data0

	@property
	def song_number (self) -> int:
		return self.data0

	# ── System real-time messages ────────────────────────────────────

	def is_real_time_message (self) -> bool:
		return midimessage.status.is_real_time_message(self.status)

	def real_time_message (self) -> midimessage.status.RealTimeMessage:

		"""
		Return the real-time message type. Raises ``ValueError`` for reserved values.
		"""

		return midimessage.status.real_time_message(self.status)

	def is_clock_message (self) -> bool:
		return midimessage.status.is_clock_message(self.status)

	def is_tick (self) -> bool:
		return midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.TICK, self.status)

	def is_start (self) -> bool:
		return midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.START, self.status)

	def is_continue (self) -> bool:
		return midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.CONTINUE, self.status)

	def is_stop (self) -> bool:
		return midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.STOP, self.status)

	def is_active_sensing (self) -> bool:
		return midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.ACTIVE_SENSING, self.status)

	def is_reset (self) -> bool:
		return midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.RESET, self.status)

	# ── Factories ────────────────────────────────────────────────────
	#
	# The channel is OR'd into the status byte unchecked. Channels outside
	# 0-15 spill into the message type nibble.

	@staticmethod
	def make_note_off (channel: int, note: int, velocity: int = midimessage.constants.velocity.DEFAULT_NOTE_OFF_VELOCITY) -> "MidiMessage":
		return MidiMessage(midimessage.status.ChannelMessage.NOTE_OFF | channel, note, velocity)

	@staticmethod
	def make_note_on (channel: int, note: int, velocity: int = midimessage.constants.velocity.DEFAULT_NOTE_ON_VELOCITY) -> "MidiMessage":
		return MidiMessage(midimessage.status.ChannelMessage.NOTE_ON | channel, note, velocity)

	@staticmethod
	def make_key_pressure (channel: int, note: int, pressure: int) -> "MidiMessage":
		return MidiMessage(midimessage.status.ChannelMessage.KEY_PRESSURE | channel, note, pressure)

	@staticmethod
	def make_control_change (channel: int, controller_number: int, controller_value: int) -> "MidiMessage":
		return MidiMessage(midimessage.status.ChannelMessage.CONTROL_CHANGE | channel, controller_number, controller_value)

	@staticmethod
	def make_program_change (channel: int, program_number: int) -> "MidiMessage":
		return MidiMessage(midimessage.status.ChannelMessage.PROGRAM_CHANGE | channel, program_number)

	@staticmethod
	def make_channel_pressure (channel: int, pressure: int) -> "MidiMessage":
		return MidiMessage(midimessage.status.ChannelMessage.CHANNEL_PRESSURE | channel, pressure)

	@staticmethod
	def make_pitch_bend (channel: int, value: int) -> "MidiMessage":

		"""
		Build a pitch bend message from a signed value.

		Parameters:
			channel: MIDI channel (0-15).
			value: Bend amount, -8192 (full down) to 8191 (full up), 0 is centre.
				Values outside the range are clamped.

		The value is re-centred to 0-16383 and split into two 7-bit data
		bytes, least significant first. This is the inverse of ``pitch_bend``.
		"""

		unsigned = max(0, min(midimessage.constants.data.MAX_14BIT, value + midimessage.constants.data.PITCH_BEND_CENTER))

		return MidiMessage(
			midimessage.status.ChannelMessage.PITCH_BEND | channel,
			unsigned & midimessage.constants.data.DATA_MASK,
			(unsigned >> midimessage.constants.data.DATA_BITS) & midimessage.constants.data.DATA_MASK
		)
