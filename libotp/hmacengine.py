# -*- coding: utf-8 -*-
"""
# HMAC wrapper
# Copyright (c) 2023-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

from libotp.exception import HmacBackendError, UnsupportedHash
from libotp.util import getEnvChoice, getEnvFlag

import sys

__all__ = [
	"HmacHash",
	"HMAC",
]

class HmacHash:
	"""The closed set of supported HMAC hash algorithms.
	"""

	SHA1	= "SHA1"
	SHA256	= "SHA256"
	SHA512	= "SHA512"

	ALL = (SHA1, SHA256, SHA512)

	DIGEST_SIZE = {
		SHA1	: 160 // 8,
		SHA256	: 256 // 8,
		SHA512	: 512 // 8,
	}

	@classmethod
	def parse(cls, hmacHash):
		"""Normalize a hash name string like 'sha-256' to one of ALL.
		Raises UnsupportedHash, if the name is not known.
		"""
		if not isinstance(hmacHash, str):
			raise UnsupportedHash("Invalid HMAC hash type.")
		name = hmacHash.replace("-", "")
		name = name.replace("_", "")
		name = name.replace(" ", "")
		name = name.upper().strip()
		if name not in cls.ALL:
			raise UnsupportedHash("Invalid HMAC hash type '%s'." % hmacHash)
		return name

	@classmethod
	def digestSize(cls, hmacHash):
		return cls.DIGEST_SIZE[cls.parse(hmacHash)]

class HMAC:
	"""Abstraction layer for the HMAC implementation.
	"""

	__singleton = None
	DEBUG = False

	@classmethod
	def get(cls):
		"""Get the HMAC singleton.
		"""
		if cls.__singleton is None:
			cls.__singleton = cls()
		return cls.__singleton

	@classmethod
	def reset(cls):
		"""Drop the singleton, so that the next get()
		evaluates LIBOTP_HMACLIB and LIBOTP_DEBUG again.
		"""
		cls.__singleton = None

	def __init__(self):
		self.__cryptodome = None
		self.__hashlib = None
		self.backendName = None
		self.debug = getEnvFlag("LIBOTP_DEBUG", default=self.DEBUG)

		hmaclib = getEnvChoice("LIBOTP_HMACLIB")

		if hmaclib in ("", "cryptodome", "pycryptodomex"):
			# Try to use Cryptodome
			try:
				import Cryptodome.Hash.HMAC
				import Cryptodome.Hash.SHA1
				import Cryptodome.Hash.SHA256
				import Cryptodome.Hash.SHA512
				self.__cryptodome = Cryptodome
				self.__setBackend("cryptodome")
				return
			except ImportError as e:
				pass

		if hmaclib == "hashlib":
			# Use the Python standard library,
			# but only if explicitly selected.
			import hashlib
			import hmac
			self.__hashlib = (hmac, hashlib)
			self.__setBackend("hashlib")
			return

		msg = "Python module import error."
		if hmaclib == "":
			msg += "\n'pycryptodomex' is not installed."
		else:
			msg += "\n'LIBOTP_HMACLIB=%s' is not supported or not installed." % hmaclib
		raise HmacBackendError(msg)

	def __setBackend(self, name):
		self.backendName = name
		if self.debug:
			print("libotp: Using HMAC backend '%s'." % name,
			      file=sys.stderr)

	def digest(self, hmacHash, key, message):
		"""Calculate the HMAC of 'message'.
		hmacHash: One of HmacHash.ALL or a name accepted by HmacHash.parse().
		key: The HMAC key bytes.
		message: The message bytes.
		Returns the raw digest bytes.
		"""
		hmacHash = HmacHash.parse(hmacHash)
		key = bytes(key)
		message = bytes(message)

		try:
			if self.__cryptodome is not None:
				# Use Cryptodome
				digestmod = {
					HmacHash.SHA1	: self.__cryptodome.Hash.SHA1,
					HmacHash.SHA256	: self.__cryptodome.Hash.SHA256,
					HmacHash.SHA512	: self.__cryptodome.Hash.SHA512,
				}[hmacHash]
				h = self.__cryptodome.Hash.HMAC.new(key,
								     msg=message,
								     digestmod=digestmod)
				return h.digest()

			if self.__hashlib is not None:
				# Use hashlib
				hmac, hashlib = self.__hashlib
				digestmod = {
					HmacHash.SHA1	: hashlib.sha1,
					HmacHash.SHA256	: hashlib.sha256,
					HmacHash.SHA512	: hashlib.sha512,
				}[hmacHash]
				return hmac.new(key, message, digestmod).digest()

		except Exception as e:
			raise HmacBackendError("HMAC error: %s: %s" % (type(e), str(e)))
		raise HmacBackendError("HMAC not implemented.")

	@classmethod
	def quickSelfTest(cls):
		"""Run a quick algorithm self test (RFC 2202 and RFC 4231).
		"""
		inst = cls.get()
		expected = {
			HmacHash.SHA1	: "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79",
			HmacHash.SHA256	: "5bdcc146bf60754e6a042426089575c7"
					  "5a003f089d2739839dec58b964ec3843",
			HmacHash.SHA512	: "164b7a7bfcf819e2e395fbe73b56e0a3"
					  "87bd64222e831fd610270cd7ea250554"
					  "9758bf75c05a994a6d034f65f8f0e6fd"
					  "caeab1a34d4a6b4b636e070a38bce737",
		}
		for hmacHash in HmacHash.ALL:
			d = inst.digest(hmacHash, b"Jefe", b"what do ya want for nothing?")
			if d != bytes.fromhex(expected[hmacHash]):
				raise HmacBackendError("HMAC-%s: Quick self test failed." % hmacHash)
