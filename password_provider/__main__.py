# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Allow running the cli with ``python -m password_provider``."""

from password_provider.cli import app

if __name__ == "__main__":
    app()
