import unittest
from typing import Any, Optional

from structlog import get_logger

from ledgercodec.codecs import Codec

logger = get_logger()


class TestCase(unittest.TestCase):
    def assertRoundTrip(self, codec: Codec[Any], value: Any, expected_hex: Optional[str] = None) -> bytes:
        """Encode and decode `value`, optionally checking the exact bytes, and return the encoded bytes."""
        data = codec.encode(value)
        if expected_hex is not None:
            self.assertEqual(data.hex(), expected_hex)
        self.assertEqual(codec.decode(data), value)
        # hex input must decode to the same value
        self.assertEqual(codec.decode(data.hex()), value)
        return data
