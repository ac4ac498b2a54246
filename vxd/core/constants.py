"""Centralised defaults.

Values used when settings.ini is missing a key, plus file naming.
"""

# ---------------------------------------------------------------------------
# Parser  (vxd/core/parser.py)
# ---------------------------------------------------------------------------
DEFAULT_ENCODING        = "utf-8"
DEFAULT_STRICT_TYPES    = True    # unknown type tag → VxdError
DEFAULT_WARN_ON_DEGRADE = True    # WARNING log per value that fell back to Null

# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------
VXD_SUFFIX    = ".vxd"
SETTINGS_FILE = "settings.ini"
