"""Status output, rust-analyzer project files and worked solutions for programming drills."""

__version__ = "0.1.0"