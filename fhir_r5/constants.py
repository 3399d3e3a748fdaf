"""
Codec constants.

These values are intentionally not configurable via environment variables.
"""

FHIR_VERSION = "5.0.0"

# JSON Pointer root
ROOT_PATH = "/"

# Document limits
DEFAULT_MAX_DOCUMENT_BYTES = 64 * 1024 * 1024  # 64 MiB

UTF8_BOM = b"\xef\xbb\xbf"
