"""
spotmenu - control Spotify from rofi menus.
"""

__version__ = "0.3.0"
