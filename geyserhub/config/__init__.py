#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Configuration module: loads the versioned GeyserHub configuration files and
keeps the validated documents in memory.
"""

from geyserhub.config.ids import ConfigId
from geyserhub.config.configuration import ConfigurationSection, FileConfiguration
from geyserhub.config.manager import (
    ConfigManager, ConfigSchema, ConfigError, DirectoryCreationError, ConfigParseError,
    MissingVersionError, VersionTypeError, VersionMismatchError,
)

__all__ = [
    'ConfigId', 'ConfigurationSection', 'FileConfiguration',
    'ConfigManager', 'ConfigSchema', 'ConfigError', 'DirectoryCreationError',
    'ConfigParseError', 'MissingVersionError', 'VersionTypeError', 'VersionMismatchError',
]
