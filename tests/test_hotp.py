from otp_tstlib import *
initTest(__file__)

from libotp.exception import *
from libotp.hmacotp import *
from libotp.secret import *

class Test_HOTP(TestCase):
	RESULTS = ("755224", "287082", "359152", "969429", "338314",
		   "254676", "287922", "162583", "399871", "520489")

	def test_rfc4226(self):
		for counter, expected in enumerate(self.RESULTS):
			self.assertEqual(hotp(key=RFC4226_SECRET,
					      counter=counter,
					      nrDigits=6,
					      hmacHash="SHA1"),
					 expected)
			self.assertEqual(hotp(key=Secret(RFC4226_SECRET),
					      counter=counter),
					 expected)
			self.assertEqual(hotpValue(key=RFC4226_SECRET,
						   counter=counter),
					 int(expected))

	def test_rfc4226_intermediate(self):
		digest = hotpDigest(RFC4226_SECRET, 0, "SHA1")
		self.assertEqual(digest,
				 bytes.fromhex("cc93cf18508d94934c64b65d8ba7667fb7cde4b0"))
		self.assertEqual(dynamicTruncate(digest), 1284755224)
		digest = hotpDigest(RFC4226_SECRET, 1, "SHA1")
		self.assertEqual(digest,
				 bytes.fromhex("75a48a19d4cbe100644e8ac1397eea747a2d33ab"))
		self.assertEqual(dynamicTruncate(digest), 1094287082)

	def test_truncate(self):
		# Offset from the last byte, sign bit cleared.
		digest = bytearray(64)
		digest[-1] = 0x0A
		digest[10:14] = b"\xFF\x00\x00\x01"
		self.assertEqual(dynamicTruncate(digest), 0x7F000001)
		digest = bytearray(32)
		digest[-1] = 0x0F
		digest[15:19] = b"\x12\x34\x56\x78"
		self.assertEqual(dynamicTruncate(digest), 0x12345678)

	def test_digits(self):
		for hmacHash in ("SHA1", "SHA256", "SHA512"):
			for nrDigits in range(1, 9 + 1):
				for counter in range(20):
					otp = hotp(key=RFC4226_SECRET,
						   counter=counter,
						   nrDigits=nrDigits,
						   hmacHash=hmacHash)
					self.assertEqual(len(otp), nrDigits)
					self.assertTrue(otp.isdigit())
					self.assertEqual(otp,
							 hotp(key=bytearray(RFC4226_SECRET),
							      counter=counter,
							      nrDigits=nrDigits,
							      hmacHash=hmacHash))
		# Shorter codes are suffixes of the longer code.
		for counter, expected in enumerate(self.RESULTS):
			for nrDigits in range(1, 6 + 1):
				self.assertEqual(hotp(RFC4226_SECRET, counter, nrDigits),
						 expected[6 - nrDigits :])

	def test_hash_names(self):
		for name in ("sha1", "SHA-1", "sha_1", " Sha 1 "):
			self.assertEqual(hotp(RFC4226_SECRET, 0, hmacHash=name), "755224")
		self.assertEqual(hotp(RFC4226_SECRET, 0, hmacHash="sha-256"),
				 hotp(RFC4226_SECRET, 0, hmacHash="SHA256"))
		self.assertNotEqual(hotpDigest(RFC4226_SECRET, 0, "SHA256"),
				    hotpDigest(RFC4226_SECRET, 0, "SHA512"))
		self.assertEqual(len(hotpDigest(RFC4226_SECRET, 0, "SHA256")), 32)
		self.assertEqual(len(hotpDigest(RFC4226_SECRET, 0, "SHA512")), 64)

	def test_counter_range(self):
		otp = hotp(RFC4226_SECRET, COUNTER_MAX)
		self.assertEqual(len(otp), 6)

	def test_hotp_errors(self):
		self.assertRaises(InvalidLength, lambda: hotp(RFC4226_SECRET, 0, nrDigits=0))
		self.assertRaises(InvalidLength, lambda: hotp(RFC4226_SECRET, 0, nrDigits=10))
		self.assertRaises(InvalidLength, lambda: hotp(RFC4226_SECRET, 0, nrDigits=6.0))
		self.assertRaises(InvalidLength, lambda: hotp(RFC4226_SECRET, 0, nrDigits=True))
		self.assertRaises(UnsupportedHash, lambda: hotp(RFC4226_SECRET, 0, hmacHash="foobar"))
		self.assertRaises(UnsupportedHash, lambda: hotp(RFC4226_SECRET, 0, hmacHash="MD5"))
		self.assertRaises(UnsupportedHash, lambda: hotp(RFC4226_SECRET, 0, hmacHash=None))
		self.assertRaises(InvalidCounter, lambda: hotp(RFC4226_SECRET, -1))
		self.assertRaises(InvalidCounter, lambda: hotp(RFC4226_SECRET, 2**64))
		self.assertRaises(InvalidCounter, lambda: hotp(RFC4226_SECRET, 1.0))
		self.assertRaises(InvalidSecret, lambda: hotp(b"", 0))
		self.assertRaises(InvalidSecret, lambda: hotp("GEZDGNBV", 0))
		# All errors are OtpErrors.
		self.assertRaises(OtpError, lambda: hotp(RFC4226_SECRET, 0, nrDigits=0))

	def test_hotp_object(self):
		h = Hotp(Secret(RFC4226_SECRET))
		for counter, expected in enumerate(self.RESULTS):
			self.assertEqual(h.generate(counter), expected)
			self.assertEqual(h.verify(expected, counter), counter)
		self.assertEqual(h.digest(0), hotpDigest(RFC4226_SECRET, 0))
		self.assertIsNone(h.verify("287082", 0))
		self.assertEqual(h.verify("287082", 0, window=1), 1)
		h = Hotp(RFC4226_SECRET, hmacHash="sha-512", nrDigits=8)
		self.assertEqual(h.hmacHash, "SHA512")
		self.assertEqual(len(h.generate(0)), 8)
		self.assertRaises(InvalidLength, lambda: Hotp(RFC4226_SECRET, nrDigits=10))
		self.assertRaises(UnsupportedHash, lambda: Hotp(RFC4226_SECRET, hmacHash="x"))
		self.assertRaises(InvalidSecret, lambda: Hotp(b""))

class Test_Secret(TestCase):
	def test_secret(self):
		s = Secret(RFC4226_SECRET)
		self.assertEqual(bytes(s), RFC4226_SECRET)
		self.assertEqual(len(s), 20)
		self.assertEqual(s, Secret(bytearray(RFC4226_SECRET)))
		self.assertNotIn("1234", repr(s))
		self.assertEqual(secretBytes(s), RFC4226_SECRET)
		self.assertEqual(secretBytes(memoryview(RFC4226_SECRET)), RFC4226_SECRET)

	def test_immutable(self):
		s = Secret(RFC4226_SECRET)
		with self.assertRaises(AttributeError):
			s.key = b"x"

	def test_secret_errors(self):
		self.assertRaises(InvalidSecret, lambda: Secret(b""))
		self.assertRaises(InvalidSecret, lambda: Secret("secret"))
		self.assertRaises(InvalidSecret, lambda: Secret(None))
		self.assertRaises(InvalidSecret, lambda: secretBytes(bytearray()))
		self.assertRaises(InvalidSecret, lambda: secretBytes(42))
