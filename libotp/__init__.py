# -*- coding: utf-8 -*-

import sys
if sys.version_info[0:2] < (3, 7):
	raise Exception("libotp requires Python >=3.7")
del sys

import libotp.exception
import libotp.hmacengine
import libotp.hmacotp
import libotp.secret
import libotp.timeotp
import libotp.util
import libotp.verify
import libotp.version

from libotp.exception import *
from libotp.hmacengine import *
from libotp.hmacotp import *
from libotp.secret import *
from libotp.timeotp import *
from libotp.verify import *
from libotp.version import *

verify_hotp = verifyHotp
verify_totp = verifyTotp

__version__ = VERSION_STRING
