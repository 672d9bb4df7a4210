# -*- coding: utf-8 -*-
"""
# HOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import *
from libotp.hmacengine import HMAC, HmacHash
from libotp.secret import secretBytes

__all__ = [
	"COUNTER_MAX",
	"DIGITS_MIN",
	"DIGITS_MAX",
	"checkCounter",
	"checkDigits",
	"hotpDigest",
	"dynamicTruncate",
	"hotpValue",
	"hotp",
	"Hotp",
]

COUNTER_MAX = (2 ** 64) - 1
DIGITS_MIN = 1
DIGITS_MAX = 9

def checkCounter(counter):
	if (not isinstance(counter, int) or
	    isinstance(counter, bool) or
	    not (0 <= counter <= COUNTER_MAX)):
		raise InvalidCounter("Invalid counter.")
	return counter

def checkDigits(nrDigits):
	if (not isinstance(nrDigits, int) or
	    isinstance(nrDigits, bool) or
	    not (DIGITS_MIN <= nrDigits <= DIGITS_MAX)):
		raise InvalidLength("Invalid number of digits.")
	return nrDigits

def hotpDigest(key, counter, hmacHash="SHA1"):
	"""Calculate the raw HMAC of the HOTP counter.
	key: The HOTP key. A Secret or raw bytes.
	counter: The HOTP counter integer.
	hmacHash: The name string of the hashing algorithm.
	"""
	key = secretBytes(key)
	counter = checkCounter(counter)
	hmacHash = HmacHash.parse(hmacHash)

	counter = counter.to_bytes(length=8, byteorder="big", signed=False)
	return HMAC.get().digest(hmacHash, key, counter)

def dynamicTruncate(digest):
	"""RFC 4226 dynamic truncation.
	The low nibble of the last digest byte selects 4 bytes,
	which are returned as 31 bit unsigned integer.
	"""
	h = bytes(digest)
	offset = h[-1] & 0xF
	hSlice = int.from_bytes(h[offset:offset+4], byteorder="big", signed=False)
	return hSlice & 0x7FFFFFFF

def hotpValue(key, counter, nrDigits=6, hmacHash="SHA1"):
	"""Calculate the HOTP token as integer (not zero padded).
	"""
	nrDigits = checkDigits(nrDigits)
	return dynamicTruncate(hotpDigest(key, counter, hmacHash)) % (10 ** nrDigits)

def hotp(key, counter, nrDigits=6, hmacHash="SHA1"):
	"""HOTP - An HMAC-Based One-Time Password Algorithm.
	key: The HOTP key. A Secret or raw bytes.
	counter: The HOTP counter integer.
	nrDigits: The number of digits to return. Can be 1 to 9.
	hmacHash: The name string of the hashing algorithm.
	Returns the calculated HOTP token string.
	"""
	otp = hotpValue(key, counter, nrDigits, hmacHash)
	fmt = "%0" + str(nrDigits) + "d"
	return fmt % otp

class Hotp:
	"""HOTP parameter set.
	Every method forwards to the module level functions.
	"""

	def __init__(self, key, hmacHash="SHA1", nrDigits=6):
		self.key = key
		self.hmacHash = HmacHash.parse(hmacHash)
		self.nrDigits = checkDigits(nrDigits)
		secretBytes(key)

	def digest(self, counter):
		return hotpDigest(self.key, counter, self.hmacHash)

	def generate(self, counter):
		return hotp(self.key, counter, self.nrDigits, self.hmacHash)

	def verify(self, code, counter, window=0):
		"""Verify 'code' against 'counter' +/- 'window'.
		Returns the matched counter or None.
		"""
		from libotp.verify import verifyHotp
		return verifyHotp(self.key, code, counter,
				  window=window,
				  nrDigits=self.nrDigits,
				  hmacHash=self.hmacHash)
