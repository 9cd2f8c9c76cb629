import unittest

import pytest

import midimessage.status


class LengthTableTests (unittest.TestCase):

	"""
	Tests for the data byte counts of each message type.
	"""

	def test_channel_message_lengths (self) -> None:

		"""
		Two data bytes for notes, key pressure, controllers and pitch bend; one for program and channel pressure.
		"""

		ChannelMessage = midimessage.status.ChannelMessage

		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.NOTE_ON), 2)
		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.NOTE_OFF), 2)
		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.KEY_PRESSURE), 2)
		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.CONTROL_CHANGE), 2)
		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.PITCH_BEND), 2)
		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.PROGRAM_CHANGE), 1)
		self.assertEqual(midimessage.status.channel_message_length(ChannelMessage.CHANNEL_PRESSURE), 1)


	def test_system_message_lengths (self) -> None:

		"""
		SysEx reports no data bytes; its payload is streamed by the caller.
		"""

		SystemMessage = midimessage.status.SystemMessage

		self.assertEqual(midimessage.status.system_message_length(SystemMessage.TIME_CODE), 1)
		self.assertEqual(midimessage.status.system_message_length(SystemMessage.SONG_SELECT), 1)
		self.assertEqual(midimessage.status.system_message_length(SystemMessage.SONG_POSITION), 2)
		self.assertEqual(midimessage.status.system_message_length(SystemMessage.SYSTEM_EXCLUSIVE), 0)
		self.assertEqual(midimessage.status.system_message_length(SystemMessage.TUNE_REQUEST), 0)
		self.assertEqual(midimessage.status.system_message_length(SystemMessage.END_OF_EXCLUSIVE), 0)


	def test_unknown_values_have_no_data (self) -> None:

		"""
		Reserved and unknown values fall back to 0 instead of raising.
		"""

		self.assertEqual(midimessage.status.channel_message_length(0x93), 0)
		self.assertEqual(midimessage.status.channel_message_length(0x00), 0)
		self.assertEqual(midimessage.status.system_message_length(0xF4), 0)
		self.assertEqual(midimessage.status.system_message_length(0xF5), 0)


def test_categories_partition_status_bytes () -> None:

	"""Every status byte belongs to exactly one category; data bytes belong to none."""

	for status in range(0x100):

		matches = [
			midimessage.status.is_channel_message(status),
			midimessage.status.is_system_message(status),
			midimessage.status.is_real_time_message(status),
		].count(True)

		if status >= 0x80:
			assert matches == 1, f"0x{status:02X}"
		else:
			assert matches == 0, f"0x{status:02X}"


def test_category_boundaries () -> None:

	"""Check the first and last byte of each range."""

	assert not midimessage.status.is_channel_message(0x7F)
	assert midimessage.status.is_channel_message(0x80)
	assert midimessage.status.is_channel_message(0xEF)
	assert not midimessage.status.is_channel_message(0xF0)

	assert midimessage.status.is_system_message(0xF0)
	assert midimessage.status.is_system_message(0xF7)
	assert not midimessage.status.is_system_message(0xF8)

	assert midimessage.status.is_real_time_message(0xF8)
	assert midimessage.status.is_real_time_message(0xFF)


def test_reserved_values_keep_their_category () -> None:

	"""Undefined 0xF4/0xF5 are system messages and 0xF9/0xFD are real-time, with no named type."""

	for status in (0xF4, 0xF5):
		assert midimessage.status.is_system_message(status)
		with pytest.raises(ValueError):
			midimessage.status.system_message(status)

	for status in (0xF9, 0xFD):
		assert midimessage.status.is_real_time_message(status)
		with pytest.raises(ValueError):
			midimessage.status.real_time_message(status)


def test_channel_message_type_ignores_channel () -> None:

	"""Exact channel type matching masks off the channel nibble."""

	NOTE_ON = midimessage.status.ChannelMessage.NOTE_ON

	for channel in range(16):
		assert midimessage.status.is_channel_message_type(NOTE_ON, 0x90 | channel)
		assert not midimessage.status.is_channel_message_type(NOTE_ON, 0x80 | channel)


def test_system_and_real_time_types_match_whole_byte () -> None:

	"""System and real-time type matching compares the full status byte."""

	assert midimessage.status.is_system_message_type(midimessage.status.SystemMessage.SONG_POSITION, 0xF2)
	assert not midimessage.status.is_system_message_type(midimessage.status.SystemMessage.SONG_POSITION, 0xF3)
	assert midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.STOP, 0xFC)
	assert not midimessage.status.is_real_time_message_type(midimessage.status.RealTimeMessage.STOP, 0xFB)


def test_enumerator_lookup () -> None:

	"""Lookups return the named type for a status byte."""

	assert midimessage.status.channel_message(0x9F) == midimessage.status.ChannelMessage.NOTE_ON
	assert midimessage.status.channel_message(0xE3) == midimessage.status.ChannelMessage.PITCH_BEND
	assert midimessage.status.system_message(0xF6) == midimessage.status.SystemMessage.TUNE_REQUEST
	assert midimessage.status.real_time_message(0xFE) == midimessage.status.RealTimeMessage.ACTIVE_SENSING


def test_channel_message_lookup_rejects_other_categories () -> None:

	"""Data bytes and system bytes have no channel message type."""

	with pytest.raises(ValueError):
		midimessage.status.channel_message(0x42)

	with pytest.raises(ValueError):
		midimessage.status.channel_message(0xF8)


def test_clock_messages () -> None:

	"""Tick, Start, Continue and Stop are clock messages; Active Sensing and Reset are not."""

	RealTimeMessage = midimessage.status.RealTimeMessage

	assert midimessage.status.is_clock_message(RealTimeMessage.TICK)
	assert midimessage.status.is_clock_message(RealTimeMessage.START)
	assert midimessage.status.is_clock_message(RealTimeMessage.CONTINUE)
	assert midimessage.status.is_clock_message(RealTimeMessage.STOP)

	assert not midimessage.status.is_clock_message(RealTimeMessage.ACTIVE_SENSING)
	assert not midimessage.status.is_clock_message(RealTimeMessage.RESET)
	assert not midimessage.status.is_clock_message(0xF9)
	assert not midimessage.status.is_clock_message(0x78)


def test_data_length_dispatches_on_category () -> None:

	"""data_length covers every status byte without raising."""

	expected = {
		0x90: 2,
		0x8F: 2,
		0xB4: 2,
		0xC5: 1,
		0xD0: 1,
		0xE9: 2,
		0xF0: 0,
		0xF1: 1,
		0xF2: 2,
		0xF3: 1,
		0xF4: 0,
		0xF6: 0,
		0xF8: 0,
		0xFF: 0,
		0x40: 0,
	}

	for status, length in expected.items():
		assert midimessage.status.data_length(status) == length, f"0x{status:02X}"

	for status in range(0x100):
		assert midimessage.status.data_length(status) in (0, 1, 2)
