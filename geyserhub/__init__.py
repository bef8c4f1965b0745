#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
GeyserHub configuration loading
"""

__version__ = '1.0.0'
