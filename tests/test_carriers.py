"""
tests/test_carriers.py
Carrier detection from reference formats.
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tracking.carriers import detect_carrier


class TestDetectCarrier:

    @pytest.mark.parametrize("number,carrier,kind", [
        ("MSKU7750050",          "Maersk", "container"),
        ("COSU1234567890",       "COSCO",  "container"),
        ("123456789012",         "FedEx",  "parcel"),
        ("1Z999AA10123456784",   "UPS",    "parcel"),
        ("1234567890",           "DHL",    "parcel"),
        ("12345678901",          "DHL",    "parcel"),
        ("MSCU123456",           "MSC",    "container"),
    ])
    def test_patterns(self, number, carrier, kind):
        match = detect_carrier(number)
        assert match is not None
        assert match.name == carrier
        assert match.reference_type == kind

    def test_cleans_whitespace_and_case(self):
        match = detect_carrier(" msku 775 0050 ")
        assert match.name == "Maersk"
        assert match.reference == "MSKU7750050"

    def test_fedex_spaced_format(self):
        assert detect_carrier("1234 5678 9012").name == "FedEx"

    @pytest.mark.parametrize("number", ["", "HELLO", "12345", "ABC1234567"])
    def test_unrecognised(self, number):
        assert detect_carrier(number) is None
