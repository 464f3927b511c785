"""Line counting and blank-line analysis for text files."""

__version__ = "0.1.0"
