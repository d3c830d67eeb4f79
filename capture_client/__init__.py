"""Capture/upload client for the transcription relay."""
