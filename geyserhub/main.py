#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
GeyserHub: hub plugin configuration loader
Main entry point
"""

import os
import sys
import logging
import argparse

from geyserhub.config import ConfigId, ConfigManager
from geyserhub.plugin import PluginHost
from geyserhub.utils.logger import setup_logging

DEFAULT_DATA_DIR = os.path.join('plugins', 'GeyserHub')
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class GeyserHub:
    """Owns the single plugin host and configuration manager of the process"""

    def __init__(self, data_folder=DEFAULT_DATA_DIR, resource_dir=None, logger=None):
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self.host = PluginHost(data_folder, resource_dir)
        self.config_manager = ConfigManager(self.host)

    def enable(self):
        """Load every configuration; False if any of them failed"""
        self.logger.info(f"Loading configurations from {self.host.data_folder}")
        if not self.config_manager.load_all_configs():
            self.logger.error("Failed to load all configurations")
            return False
        self.logger.info(f"Loaded {len(ConfigId.VALUES)} configurations")
        return True

    def reload(self):
        """Reload from disk; configurations that fail keep their previous contents"""
        self.logger.info("Reloading configurations")
        return self.enable()


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='GeyserHub configuration loader')
    parser.add_argument('--data-dir', type=str, default=DEFAULT_DATA_DIR,
                        help='Plugin data directory holding the configuration files')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        default=os.environ.get('GEYSERHUB_LOG_LEVEL', 'INFO').upper(),
                        help='Logging level')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='Also write logs to a dated file in this directory')
    parser.add_argument('--show', type=str.upper, choices=[config_id.name for config_id in ConfigId.VALUES],
                        help='Print a loaded configuration as YAML')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_dir)

    hub = GeyserHub(args.data_dir)
    success = hub.enable()

    if args.show:
        configuration = hub.config_manager.get_file_configuration(ConfigId[args.show])
        if configuration is None:
            hub.logger.error(f"{ConfigId[args.show].file_name} is not loaded")
            return 1
        sys.stdout.write(configuration.dumps())

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
