# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Exit codes for the validate command.

Exit codes:
    0 - INSTALL_CONFIRMED: skill approved and the user confirmed install
    1 - NOT_INSTALLED: rejected, declined, or validation failed
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    INSTALL_CONFIRMED = 0
    NOT_INSTALLED = 1
