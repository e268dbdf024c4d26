"""Load height maps, project them isometrically and draw them as coloured wireframes."""

__version__ = "0.1.0"