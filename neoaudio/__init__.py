"""Helpers for the NEO stem-based audio format: codec errors, residuals,
DSP enhancement, WAV I/O, stem labels and metadata reports."""

__version__ = "0.1.0"