# -*- coding: utf-8 -*-
"""
# HOTP/TOTP library
# Copyright (c) 2011-2024 Michael Büsch <m@bues.ch>
# Licensed under the GNU/GPL version 2 or later.
"""

import os

__all__ = [
	"str2bool",
	"getEnvFlag",
	"getEnvChoice",
]

def str2bool(string, default=False):
	s = string.lower().strip()
	if not s:
		return default
	if s in ("true", "yes", "on", "1"):
		return True
	if s in ("false", "no", "off", "0"):
		return False
	try:
		return bool(int(s))
	except ValueError:
		return default

def getEnvFlag(name, default=False):
	"""Read a boolean flag from the environment variable 'name'.
	"""
	return str2bool(os.getenv(name, ""), default=default)

def getEnvChoice(name):
	"""Read a normalized (lower case, stripped) choice string
	from the environment variable 'name'.
	Returns an empty string, if the variable is not set.
	"""
	return os.getenv(name, "").lower().strip()
