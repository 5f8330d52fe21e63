"""Summarize YouTube videos from their transcripts using OpenRouter models."""

__version__ = '0.1.0'
