"""Prompt Atlas: structured prompt templates from community READMEs."""

__version__ = "0.1.0"
