"""Vendor fragment matcher.

PC manufacturers append short OEM tokens to Internet Explorer user agents
("MDDRJS" for Dell, "MAAR" for Acer). A token followed by a separator
identifies the brand even when nothing else in the string does.

Architecture:
    - Infrastructure adapter implementing VendorFragmentMatcherProtocol
    - Signature table compiled in create() (Result type)
"""

import re

from uadetect.core.result import Failure, Result, Success
from uadetect.domain.errors import MatcherUnavailableError
from uadetect.infrastructure.matchers.pattern import compile_signatures

VENDOR_FRAGMENTS: dict[str, tuple[str, ...]] = {
    "Dell": ("MDDR(?:JS)?", "MDDC(?:JS)?", "MDDS(?:JS)?"),
    "Acer": ("MAAR(?:JS)?",),
    "Sony": ("MASE(?:JS)?", "MASP(?:JS)?", "MASA(?:JS)?"),
    "Asus": ("MAAU", "NP0[26789]", "ASJB", "ASU2(?:JS)?"),
    "Samsung": ("MASM(?:JS)?", "SMJB"),
    "Lenovo": ("MALC(?:JS)?", "MALE(?:JS)?", "MALN(?:JS)?", "LCJB", "LEN2"),
    "Toshiba": ("MATM(?:JS)?", "MATB(?:JS)?", "MATP(?:JS)?", "TNJB", "TAJB"),
    "Medion": ("MAMD",),
    "MSI": ("MAMI(?:JS)?", "MAM3"),
    "Gateway": ("MAGW(?:JS)?",),
    "Fujitsu": ("MAFS(?:JS)?", "FSJB"),
    "HP": ("MAHP", "HPCMHP", "HPNTDF(?:JS)?", "HPDTDF(?:JS)?"),
    "Panasonic": ("MDDP(?:JS)?",),
}

FRAGMENT_TERMINATOR = r"[^a-z0-9]+"


class SignatureVendorFragmentMatcher:
    """Vendor fragment matcher (implements VendorFragmentMatcherProtocol)."""

    def __init__(self, fragments: list[tuple[str, re.Pattern[str]]]) -> None:
        """Initialize with a pre-compiled fragment table.

        Use SignatureVendorFragmentMatcher.create() instead of direct construction.
        """
        self._fragments = fragments

    @classmethod
    def create(
        cls, fragments: dict[str, tuple[str, ...]] | None = None
    ) -> Result["SignatureVendorFragmentMatcher", MatcherUnavailableError]:
        """Build the matcher, compiling its fragment table.

        Args:
            fragments: Brand -> fragment patterns (defaults to VENDOR_FRAGMENTS).

        Returns:
            Success(SignatureVendorFragmentMatcher) or
            Failure(MatcherUnavailableError) naming the broken pattern.
        """
        table = [
            (brand, f"(?:{fragment}){FRAGMENT_TERMINATOR}")
            for brand, brand_fragments in (fragments or VENDOR_FRAGMENTS).items()
            for fragment in brand_fragments
        ]
        match compile_signatures(
            (pattern for _, pattern in table), matcher_name="vendor_fragment"
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=compiled):
                return Success(
                    value=cls(
                        [(brand, pattern) for (brand, _), pattern in zip(table, compiled)]
                    )
                )

    def match(self, user_agent: str) -> str | None:
        """Extract a brand from an OEM fragment.

        Args:
            user_agent: Raw user-agent string.

        Returns:
            Brand name, or None when no fragment matched.
        """
        if not user_agent:
            return None
        for brand, pattern in self._fragments:
            if pattern.search(user_agent):
                return brand
        return None
