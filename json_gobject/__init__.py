"""json-gobject: GObject and json-glib C boilerplate from JSON Schema."""

__version__ = "0.1.0"
