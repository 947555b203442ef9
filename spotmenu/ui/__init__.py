"""rofi front end: launcher wrapper, row formatting, setup and theme."""
