"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .temp_file_storage import TempFileStorage

__all__ = ["AssemblyAITranscriber", "TempFileStorage"]
