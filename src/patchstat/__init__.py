"""patchstat: stateful unified diff classifier and diffstat summariser."""

__version__ = "0.1.0"
