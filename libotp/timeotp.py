# -*- coding: utf-8 -*-
"""
# TOTP support
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import *
from libotp.hmacengine import HmacHash
from libotp.hmacotp import *
from libotp.secret import secretBytes

import math

__all__ = [
	"DEFAULT_STEP",
	"DEFAULT_EPOCH",
	"checkStep",
	"timeToCounter",
	"counterToTime",
	"totp",
	"Totp",
]

DEFAULT_STEP = 30
DEFAULT_EPOCH = 0

def _isNumber(value):
	return (isinstance(value, (int, float)) and
		not isinstance(value, bool) and
		math.isfinite(value))

def checkStep(step):
	if not _isNumber(step) or step <= 0:
		raise InvalidStep("Invalid time step.")
	return step

def timeToCounter(t, step=DEFAULT_STEP, epoch=DEFAULT_EPOCH):
	"""Map the time 't' to the TOTP counter.
	t: The time in seconds since the Unix epoch. Fractions are floored.
	step: The time step duration in seconds.
	epoch: The time T0 in seconds at which counting starts.
	"""
	step = checkStep(step)
	if not _isNumber(t) or not _isNumber(epoch):
		raise InvalidCounter("Invalid time.")
	delta = t - epoch
	if isinstance(delta, int) and isinstance(step, int):
		return checkCounter(delta // step)
	return checkCounter(math.floor(delta / step))

def counterToTime(counter, step=DEFAULT_STEP, epoch=DEFAULT_EPOCH):
	"""Get the first second of the time step 'counter'.
	"""
	step = checkStep(step)
	counter = checkCounter(counter)
	return epoch + (counter * step)

def totp(key, t, step=DEFAULT_STEP, epoch=DEFAULT_EPOCH, nrDigits=6, hmacHash="SHA1"):
	"""TOTP - Time-Based One-Time Password Algorithm.
	key: The TOTP key. A Secret or raw bytes.
	t: The time in seconds. There is no default; the caller owns the clock.
	step: The time step duration in seconds.
	epoch: The time T0 in seconds.
	nrDigits: The number of digits to return. Can be 1 to 9.
	hmacHash: The name string of the hashing algorithm.
	Returns the calculated TOTP token string.
	"""
	checkDigits(nrDigits)
	HmacHash.parse(hmacHash)
	counter = timeToCounter(t, step, epoch)
	return hotp(key, counter, nrDigits, hmacHash)

class Totp:
	"""TOTP parameter set.
	window is the default number of steps accepted as network delay.
	"""

	def __init__(self, key, hmacHash="SHA1", nrDigits=6,
		     step=DEFAULT_STEP, epoch=DEFAULT_EPOCH, window=1):
		self.key = key
		self.hmacHash = HmacHash.parse(hmacHash)
		self.nrDigits = checkDigits(nrDigits)
		self.step = checkStep(step)
		if not _isNumber(epoch):
			raise InvalidCounter("Invalid time.")
		self.epoch = epoch
		from libotp.verify import checkWindow
		self.window = checkWindow(window)
		secretBytes(key)

	def counter(self, t):
		return timeToCounter(t, self.step, self.epoch)

	def digest(self, t):
		return hotpDigest(self.key, self.counter(t), self.hmacHash)

	def generate(self, t):
		return totp(self.key, t,
			    step=self.step,
			    epoch=self.epoch,
			    nrDigits=self.nrDigits,
			    hmacHash=self.hmacHash)

	def verify(self, code, t, window=None):
		"""Verify 'code' at time 't'.
		Returns the matched counter or None.
		"""
		from libotp.verify import verifyTotp
		return verifyTotp(self.key, code, t,
				  step=self.step,
				  epoch=self.epoch,
				  window=self.window if window is None else window,
				  nrDigits=self.nrDigits,
				  hmacHash=self.hmacHash)
