# -*- coding: utf-8 -*-
"""
Damage Survey Application Core Module
"""

from .config import Config

__all__ = ["Config"]
