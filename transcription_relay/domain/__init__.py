"""Domain layer exports."""

from .models import AudioUpload, ProviderParagraph, ProviderTranscript, ProviderWord
from .response_normalizer import ResponseNormalizer
from .upload_validator import UploadValidator

__all__ = [
    "AudioUpload",
    "ProviderParagraph",
    "ProviderTranscript",
    "ProviderWord",
    "ResponseNormalizer",
    "UploadValidator",
]
