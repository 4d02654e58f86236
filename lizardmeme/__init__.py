"""An arcade game: catch lizards for points, dodge saw blades."""

__version__ = "0.1.0"