# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import DEFAULT_API_BASE_URL, AppConfig, load_config

__all__ = ["AppConfig", "DEFAULT_API_BASE_URL", "load_config"]
