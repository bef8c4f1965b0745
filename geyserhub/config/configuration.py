#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
In-memory YAML document tree with dotted-path access.

Values are addressed with paths such as ``"Selector-Item.Slot"``; each segment
selects a key of a nested mapping. Lists, mappings and sections handed to
callers are copies, so readers cannot change a loaded document.
"""

import copy
import yaml
from typing import Any, Dict, List, Optional


class ConfigurationSection:
    """A read-only view over one mapping of a configuration document"""

    PATH_SEPARATOR = '.'

    def __init__(self, data: Optional[Dict[str, Any]] = None, path: str = ''):
        self._data = data if data is not None else {}
        self.path = path

    def _lookup(self, path: str):
        """Return (found, value) for a dotted path"""
        value = self._data
        for key in path.split(self.PATH_SEPARATOR):
            if not isinstance(value, dict) or key not in value:
                return False, None
            value = value[key]
        return True, value

    def contains(self, path: str) -> bool:
        found, _ = self._lookup(path)
        return found

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get the value at a path

        Args:
            path: dotted path of the value
            default: returned when the path does not exist

        Returns:
            A copy of the stored value, or a ConfigurationSection for mappings
        """
        found, value = self._lookup(path)
        if not found:
            return default
        if isinstance(value, dict):
            return ConfigurationSection(copy.deepcopy(value), self._child_path(path))
        return copy.deepcopy(value)

    def _child_path(self, path: str) -> str:
        if self.path:
            return f"{self.path}{self.PATH_SEPARATOR}{path}"
        return path

    def is_int(self, path: str) -> bool:
        found, value = self._lookup(path)
        return found and isinstance(value, int) and not isinstance(value, bool)

    def get_int(self, path: str, default: int = 0) -> int:
        found, value = self._lookup(path)
        if found and isinstance(value, (int, float)) and not isinstance(value, bool):
            return int(value)
        return default

    def get_string(self, path: str, default: Optional[str] = None) -> Optional[str]:
        found, value = self._lookup(path)
        if not found or value is None or isinstance(value, (dict, list)):
            return default
        return str(value)

    def get_boolean(self, path: str, default: bool = False) -> bool:
        found, value = self._lookup(path)
        if found and isinstance(value, bool):
            return value
        return default

    def get_list(self, path: str, default: Optional[List[Any]] = None) -> Optional[List[Any]]:
        found, value = self._lookup(path)
        if found and isinstance(value, list):
            return copy.deepcopy(value)
        return default

    def get_section(self, path: str) -> Optional['ConfigurationSection']:
        section = self.get(path)
        if isinstance(section, ConfigurationSection):
            return section
        return None

    def keys(self, deep: bool = False) -> List[str]:
        """
        List the keys of this section

        Args:
            deep: also list the dotted paths of every nested key
        """
        if not deep:
            return list(self._data.keys())

        paths = []

        def walk(mapping, prefix):
            for key, value in mapping.items():
                full = f"{prefix}{self.PATH_SEPARATOR}{key}" if prefix else str(key)
                paths.append(full)
                if isinstance(value, dict):
                    walk(value, full)

        walk(self._data, '')
        return paths

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def __contains__(self, path):
        return self.contains(path)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, ConfigurationSection):
            return NotImplemented
        return self._data == other._data

    def __repr__(self):
        return f"{self.__class__.__name__}(path={self.path!r}, keys={self.keys()!r})"


class FileConfiguration(ConfigurationSection):
    """A configuration document parsed from a YAML file"""

    def __init__(self, data: Optional[Dict[str, Any]] = None, file_path: Optional[str] = None):
        super().__init__(data)
        self.file_path = file_path

    @classmethod
    def loads(cls, text: str, file_path: Optional[str] = None) -> 'FileConfiguration':
        """
        Parse YAML text into a document

        Raises:
            yaml.YAMLError: malformed YAML
            ValueError: the top level of the document is not a mapping
        """
        data = yaml.safe_load(text)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Top level is not a mapping: {type(data).__name__}")
        return cls(data, file_path)

    @classmethod
    def load(cls, file_path: str) -> 'FileConfiguration':
        """
        Read and parse a YAML file

        Raises:
            OSError: the file cannot be read
            yaml.YAMLError: malformed YAML
            ValueError: the top level of the document is not a mapping
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
        return cls.loads(text, file_path)

    def dumps(self) -> str:
        return yaml.safe_dump(self._data, default_flow_style=False, sort_keys=False, allow_unicode=True)
