#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Identifiers of the configuration files managed by GeyserHub
"""

from enum import Enum


class ConfigId(Enum):
    """Known configuration files and the Config-Version each must declare"""

    MAIN = ("config.yml", 3)
    SELECTOR = ("selector.yml", 1)

    def __init__(self, file_name: str, version: int):
        self.file_name = file_name
        self.version = version

    def __str__(self):
        return self.file_name


# Load order used by ConfigManager.load_all_configs
ConfigId.VALUES = tuple(ConfigId)
