#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Host side of the plugin: data directory and bundled default resources
"""

import os
import shutil
import logging
from typing import Optional

DEFAULT_RESOURCE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'resources')


class ResourceError(Exception):
    """Bundled resource missing or unusable"""
    pass


class PluginHost:
    """Supplies the plugin data folder and copies bundled resources into it"""

    def __init__(self, data_folder: str, resource_dir: Optional[str] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Args:
            data_folder: directory holding the plugin's configuration files
            resource_dir: directory of bundled defaults, the packaged
                resources directory when omitted
            logger: logger to report through
        """
        self.data_folder = data_folder
        self.resource_dir = resource_dir or DEFAULT_RESOURCE_DIR
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def get_resource_path(self, name: str) -> str:
        """
        Locate a bundled resource

        Raises:
            ResourceError: no bundled resource with that name
        """
        if not name:
            raise ResourceError("Resource path cannot be empty")

        resource_path = os.path.join(self.resource_dir, name.replace('\\', '/'))
        if not os.path.isfile(resource_path):
            raise ResourceError(f"The embedded resource '{name}' cannot be found in {self.resource_dir}")
        return resource_path

    def save_resource(self, name: str, replace: bool = False) -> None:
        """
        Copy a bundled resource into the data folder under the same name

        Args:
            name: resource name, relative to the resource directory
            replace: overwrite an existing file in the data folder

        Raises:
            ResourceError: the resource does not exist
            OSError: the copy failed
        """
        source = self.get_resource_path(name)
        target = os.path.join(self.data_folder, name)

        os.makedirs(os.path.dirname(os.path.abspath(target)), exist_ok=True)

        if os.path.exists(target) and not replace:
            self.logger.warning(f"Could not save {os.path.basename(target)} to {target} because it already exists")
            return

        shutil.copyfile(source, target)
        self.logger.debug(f"Saved default resource {name} to {target}")
