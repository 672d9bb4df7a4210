from otp_tstlib import *
initTest(__file__)

import libotp

class Test_API(TestCase):
	def test_exports(self):
		secret = libotp.Secret(RFC4226_SECRET)
		self.assertEqual(libotp.hotp(secret, 0, 6, "SHA1"), "755224")
		self.assertEqual(libotp.totp(secret, 59, 30, 0, 8, "SHA1"), "94287082")
		self.assertEqual(libotp.verify_hotp(secret, "287082", 0, 1, 6, "SHA1"), 1)
		self.assertEqual(libotp.verify_totp(secret, "94287082", 59, 30, 0, 0, 8, "SHA1"), 1)
		self.assertIs(libotp.verify_hotp, libotp.verifyHotp)
		self.assertIs(libotp.verify_totp, libotp.verifyTotp)

	def test_errors(self):
		for exc in (libotp.InvalidLength,
			    libotp.InvalidStep,
			    libotp.InvalidWindow,
			    libotp.UnsupportedHash,
			    libotp.InvalidCounter,
			    libotp.InvalidSecret,
			    libotp.HmacBackendError):
			self.assertTrue(issubclass(exc, libotp.OtpError))

	def test_version(self):
		self.assertEqual(libotp.__version__, libotp.VERSION_STRING)
