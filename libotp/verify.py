# -*- coding: utf-8 -*-
"""
# HOTP/TOTP verification
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import *
from libotp.hmacengine import HmacHash
from libotp.hmacotp import *
from libotp.secret import secretBytes
from libotp.timeotp import *

__all__ = [
	"constantTimeCompare",
	"checkWindow",
	"driftOrder",
	"verifyHotp",
	"verifyTotp",
]

def constantTimeCompare(a, b):
	"""Compare two byte strings of equal length.
	All bytes are always visited.
	Returns True, if the strings are equal.
	"""
	if len(a) != len(b):
		return False
	result = 0
	for x, y in zip(a, b):
		result |= x ^ y
	return result == 0

def checkWindow(window):
	if (not isinstance(window, int) or
	    isinstance(window, bool) or
	    window < 0):
		raise InvalidWindow("Invalid drift window.")
	return window

def driftOrder(window):
	"""Generate the counter deltas 0, -1, +1, -2, +2, ...
	up to +/- 'window'.
	"""
	window = checkWindow(window)
	yield 0
	for distance in range(1, window + 1):
		yield -distance
		yield distance

def _codeBytes(code, nrDigits):
	"""Convert the candidate code to ASCII bytes.
	Returns None, if the code cannot possibly match.
	"""
	if isinstance(code, str):
		try:
			code = code.encode("ASCII")
		except UnicodeError:
			return None
	elif isinstance(code, (bytes, bytearray)):
		code = bytes(code)
	else:
		return None
	if len(code) != nrDigits:
		return None
	return code

def _verify(key, code, counter, window, nrDigits, hmacHash):
	codeBytes = _codeBytes(code, nrDigits)
	if codeBytes is None:
		return None
	matched = None
	for delta in driftOrder(window):
		c = counter + delta
		if not (0 <= c <= COUNTER_MAX):
			continue
		expected = hotp(key, c, nrDigits, hmacHash).encode("ASCII")
		if constantTimeCompare(expected, codeBytes):
			matched = c
			break
	return matched

def verifyHotp(key, code, counter, window=0, nrDigits=6, hmacHash="SHA1"):
	"""Verify a HOTP token.
	key: The HOTP key. A Secret or raw bytes.
	code: The candidate token string.
	counter: The expected HOTP counter integer.
	window: The number of counters accepted before and after 'counter'.
	        0 only accepts an exact match.
	nrDigits: The number of token digits.
	hmacHash: The name string of the hashing algorithm.
	Returns the matched counter or None.
	The counter is not advanced. Persisting the returned
	counter to prevent replays is up to the caller.
	"""
	secretBytes(key)
	checkCounter(counter)
	checkWindow(window)
	checkDigits(nrDigits)
	HmacHash.parse(hmacHash)
	return _verify(key, code, counter, window, nrDigits, hmacHash)

def verifyTotp(key, code, t, step=DEFAULT_STEP, epoch=DEFAULT_EPOCH,
	       window=1, nrDigits=6, hmacHash="SHA1"):
	"""Verify a TOTP token at time 't'.
	window: The number of time steps accepted before and after 't'.
	Returns the matched counter (time step) or None.
	"""
	secretBytes(key)
	checkWindow(window)
	checkDigits(nrDigits)
	HmacHash.parse(hmacHash)
	counter = timeToCounter(t, step, epoch)
	return _verify(key, code, counter, window, nrDigits, hmacHash)
