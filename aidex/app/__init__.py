"""Application composition: settings and port wiring."""
