"""Binary layout constants for the WAD container and its lumps."""

from __future__ import annotations

# Container
IWAD_MAGIC = b"IWAD"
PWAD_MAGIC = b"PWAD"
MAGIC_SIZE = 4
HEADER_FORMAT = "<4sii"
HEADER_SIZE = 12
DIRECTORY_ENTRY_FORMAT = "<ii8s"
DIRECTORY_ENTRY_SIZE = 16
NAME_SIZE = 8

# PLAYPAL
COLORS_PER_PALETTE = 256
COLOR_SIZE = 3
PALETTE_SIZE = COLORS_PER_PALETTE * COLOR_SIZE  # 768

# COLORMAP
SHADING_MAP_COUNT = 34
SHADING_MAP_SIZE = COLORS_PER_PALETTE
SHADING_TABLE_SIZE = SHADING_MAP_COUNT * SHADING_MAP_SIZE  # 8704
INVULNERABILITY_MAP = 32

# TEXTURE1 / TEXTURE2
TEXTURE_HEADER_SIZE = 22  # name, masked, width, height, columndir, patchcount
PATCH_RECORD_SIZE = 10

__all__ = [
    "IWAD_MAGIC",
    "PWAD_MAGIC",
    "MAGIC_SIZE",
    "HEADER_FORMAT",
    "HEADER_SIZE",
    "DIRECTORY_ENTRY_FORMAT",
    "DIRECTORY_ENTRY_SIZE",
    "NAME_SIZE",
    "COLORS_PER_PALETTE",
    "COLOR_SIZE",
    "PALETTE_SIZE",
    "SHADING_MAP_COUNT",
    "SHADING_MAP_SIZE",
    "SHADING_TABLE_SIZE",
    "INVULNERABILITY_MAP",
    "TEXTURE_HEADER_SIZE",
    "PATCH_RECORD_SIZE",
]
