"""Material You colour conversions, colour filters, template rendering, hooks and wallpaper setting."""

__version__ = "0.1.0"