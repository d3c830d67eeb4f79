"""Transcription relay: forwards uploaded audio to the speech provider."""
