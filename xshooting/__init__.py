"""Core of a vertical-scrolling arcade shooter: configuration, resources, scene flow and a console title screen."""

__version__ = "0.1.0"