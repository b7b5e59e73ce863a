"""
learnvim - Vim-motion training game, adventure mode engine
"""

__version__ = "0.1.0"
