"""
tracking/carriers.py
Carrier detection from the format of a container or parcel reference.
"""
import re
from dataclasses import dataclass
from typing import Optional

# Tested in order; the first matching pattern wins.
CARRIER_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("Maersk", re.compile(r"^[A-Z]{4}\d{7}$")),
    ("COSCO",  re.compile(r"^[A-Z]{4}\d{10}$")),
    ("FedEx",  re.compile(r"^\d{12}$")),
    ("UPS",    re.compile(r"^1Z[0-9A-Z]{16}$")),
    ("DHL",    re.compile(r"^\d{10}$|^\d{11}$")),
    ("MSC",    re.compile(r"^[A-Z]{4}\d{6,7}$")),
]

_CONTAINER_PREFIX = re.compile(r"^[A-Z]{4}\d")


@dataclass(frozen=True)
class CarrierMatch:
    name: str
    reference_type: str   # "container" | "parcel"
    reference: str


def clean_reference(number: str) -> str:
    return re.sub(r"\s+", "", number).upper()


def detect_carrier(number: str) -> Optional[CarrierMatch]:
    reference = clean_reference(number)
    for name, pattern in CARRIER_PATTERNS:
        if pattern.match(reference):
            return CarrierMatch(
                name=name,
                reference_type="container" if _CONTAINER_PREFIX.match(reference) else "parcel",
                reference=reference,
            )
    return None
