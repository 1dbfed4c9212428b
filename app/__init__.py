# -*- coding: utf-8 -*-
"""
Projects Application Core Module
"""

from .config import Config

__all__ = ["Config"]
