# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Static data bundled with hashglyph."""
