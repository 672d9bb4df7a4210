# -*- coding: utf-8 -*-
"""
# HOTP/TOTP exceptions
# Copyright (c) 2019-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

__all__ = [
	"OtpError",
	"InvalidLength",
	"InvalidStep",
	"InvalidWindow",
	"UnsupportedHash",
	"InvalidCounter",
	"InvalidSecret",
	"HmacBackendError",
]

class OtpError(Exception):
	"""Main HOTP/TOTP exception.
	"""

class InvalidLength(OtpError):
	"""Unsupported number of code digits.
	"""

class InvalidStep(OtpError):
	"""Non-positive TOTP time step.
	"""

class InvalidWindow(OtpError):
	"""Negative drift window.
	"""

class UnsupportedHash(OtpError):
	"""Unknown HMAC hash algorithm.
	"""

class InvalidCounter(OtpError):
	"""Counter outside of the unsigned 64 bit range.
	"""

class InvalidSecret(OtpError):
	"""Empty or non-bytes secret.
	"""

class HmacBackendError(OtpError):
	"""HMAC implementation missing or broken.
	"""
