#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Configuration manager: keeps every GeyserHub configuration file present on
disk, parsed, and checked against the Config-Version it is expected to carry.
"""

import os
import logging
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator, validators

from geyserhub.config.ids import ConfigId
from geyserhub.config.configuration import FileConfiguration
from geyserhub.plugin import ResourceError

VERSION_KEY = "Config-Version"


class ConfigError(Exception):
    """Configuration error"""
    pass


class DirectoryCreationError(ConfigError):
    """The data folder for a configuration file could not be created"""
    pass


class ConfigParseError(ConfigError):
    """The configuration file could not be read or is not valid YAML"""
    pass


class MissingVersionError(ConfigError):
    pass


class VersionTypeError(ConfigError):
    pass


class VersionMismatchError(ConfigError):
    pass


def _is_strict_integer(checker, instance):
    return isinstance(instance, int) and not isinstance(instance, bool)


# Draft 7 counts 3.0 as an integer; a version marker must be a plain int.
VersionValidator = validators.extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


class ConfigSchema:
    """Schemas the loaded documents are validated against"""

    @staticmethod
    def version(expected: int) -> Dict[str, Any]:
        """Schema requiring Config-Version to be the given integer"""
        return {
            "type": "object",
            "properties": {
                VERSION_KEY: {"type": "integer", "const": expected}
            },
            "required": [VERSION_KEY],
            "additionalProperties": True
        }

    @staticmethod
    def for_config(config_id: ConfigId) -> Dict[str, Any]:
        return ConfigSchema.version(config_id.version)


class ConfigManager:
    """Loads, validates and stores the configuration files listed in ConfigId"""

    # Reported in this order; a wrong type also fails the const check.
    _ERROR_PRIORITY = ("required", "type", "const")

    def __init__(self, plugin, logger: Optional[logging.Logger] = None):
        """
        Initialize the configuration manager

        Args:
            plugin: host providing ``data_folder`` and ``save_resource(name, replace)``
            logger: logger to report through, a class-named logger when omitted
        """
        self.plugin = plugin
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self._configurations: Dict[ConfigId, FileConfiguration] = {}

    def load_all_configs(self) -> bool:
        """
        Load every configuration in ConfigId.VALUES

        Returns:
            False if any of the configurations failed to load
        """
        total_success = True
        for config_id in ConfigId.VALUES:
            if not self.load_config(config_id):
                total_success = False
                self.logger.error(
                    f"Configuration error in {config_id.file_name} - Fix the issue or regenerate a new file."
                )
        return total_success

    def load_config(self, config_id: ConfigId) -> bool:
        """
        Load one configuration from file, creating it from the bundled
        default when it does not exist yet

        Args:
            config_id: the configuration to load

        Returns:
            The success state. On failure the previously loaded document,
            if any, is kept.
        """
        try:
            configuration = self._load(config_id)
        except ConfigParseError as e:
            self.logger.error(str(e), exc_info=e.__cause__)
            return False
        except (ConfigError, ResourceError) as e:
            self.logger.error(str(e))
            return False
        except OSError as e:
            self.logger.error(f"Failed to create {config_id.file_name} from the default resource: {e}")
            return False

        self._configurations[config_id] = configuration
        self.logger.debug(f"Loaded configuration {config_id.file_name} successfully")
        return True

    def _load(self, config_id: ConfigId) -> FileConfiguration:
        file_path = os.path.join(self.plugin.data_folder, config_id.file_name)

        if not os.path.exists(file_path):
            self._ensure_parent_folder(file_path)
            self.plugin.save_resource(config_id.file_name, False)

        try:
            configuration = FileConfiguration.load(file_path)
        except (OSError, yaml.YAMLError, ValueError) as e:
            raise ConfigParseError(f"Failed to parse {config_id.file_name}: {e}") from e

        self.validate_config(configuration, config_id)
        return configuration

    def _ensure_parent_folder(self, file_path: str) -> None:
        parent = os.path.dirname(os.path.abspath(file_path))
        if os.path.isdir(parent):
            return
        try:
            os.makedirs(parent)
        except PermissionError as e:
            raise DirectoryCreationError(f"Not permitted to create plugin folder {parent}: {e}") from e
        except OSError as e:
            raise DirectoryCreationError(f"Failed to create plugin folder {parent}: {e}") from e

    def validate_config(self, configuration: FileConfiguration, config_id: ConfigId) -> None:
        """
        Check the Config-Version of a parsed document

        Raises:
            MissingVersionError: Config-Version is absent
            VersionTypeError: Config-Version is not an integer
            VersionMismatchError: Config-Version differs from the expected version
        """
        validator = VersionValidator(ConfigSchema.for_config(config_id))
        failed = {error.validator for error in validator.iter_errors(configuration.to_dict())}
        if not failed:
            return

        first = next((name for name in self._ERROR_PRIORITY if name in failed), None)
        if first == "required":
            raise MissingVersionError(f"{VERSION_KEY} does not exist in {config_id.file_name} !")
        if first == "type":
            raise VersionTypeError(f"{VERSION_KEY} is not an integer in {config_id.file_name} !")
        if first == "const":
            raise VersionMismatchError(
                f"Mismatched config version in {config_id.file_name} ! "
                f"Expected {config_id.version}, found {configuration.get(VERSION_KEY)}. "
                f"Generate a new config and migrate your settings!"
            )
        raise ConfigError(f"Invalid configuration {config_id.file_name}: {', '.join(sorted(failed))}")

    def get_file_configuration(self, config_id: ConfigId) -> Optional[FileConfiguration]:
        """
        Get a loaded configuration

        Args:
            config_id: the config ID

        Returns:
            The configuration, or None if it has not been loaded
        """
        if config_id is None:
            raise TypeError("config_id must not be None")
        return self._configurations.get(config_id)

    def get_all_file_configurations(self) -> Mapping[ConfigId, FileConfiguration]:
        """Read-only snapshot of every loaded configuration"""
        return MappingProxyType(dict(self._configurations))
