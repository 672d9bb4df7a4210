# -*- coding: utf-8 -*-
"""
# HOTP/TOTP shared secret
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import InvalidSecret

from dataclasses import dataclass

__all__ = [
	"Secret",
	"secretBytes",
]

@dataclass(frozen=True)
class Secret:
	"""Immutable shared HOTP/TOTP key.
	The key is the raw byte string. Decoding of base32 or
	otpauth:// representations is up to the caller.
	"""
	key		: bytes

	def __post_init__(self):
		if isinstance(self.key, (bytearray, memoryview)):
			object.__setattr__(self, "key", bytes(self.key))
		if not isinstance(self.key, bytes):
			raise InvalidSecret("Invalid key type.")
		if len(self.key) <= 0:
			raise InvalidSecret("Invalid key length.")

	def __len__(self):
		return len(self.key)

	def __bytes__(self):
		return self.key

	def __repr__(self):
		return "Secret(<%d bytes>)" % len(self.key)

def secretBytes(key):
	"""Get the raw key bytes of a Secret or bytes-like object.
	"""
	if isinstance(key, Secret):
		return key.key
	if isinstance(key, (bytes, bytearray, memoryview)):
		key = bytes(key)
		if len(key) <= 0:
			raise InvalidSecret("Invalid key length.")
		return key
	raise InvalidSecret("Invalid key type.")
