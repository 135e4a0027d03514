"""Browser front-end (NiceGUI) sharing the desktop runtime."""
