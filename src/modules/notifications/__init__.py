"""Customer notification port and its default implementation."""
