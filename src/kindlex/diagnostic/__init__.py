# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax diagnostics carried by error-recovery tokens."""

from kindlex.diagnostic.syntax import Position, Span, SyntaxDiagnostic

__all__ = [
    "Position",
    "Span",
    "SyntaxDiagnostic",
]
