"""Financial calculators (SIP, SWP, lumpsum, EMI, income tax) with a small JSON API."""

__version__ = "0.1.0"
