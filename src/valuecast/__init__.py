"""valuecast — view a typed value rendered as another primitive type."""

__version__ = "0.1.0"
