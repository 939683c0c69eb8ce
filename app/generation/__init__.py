from app.generation.base import BaseDocumentGenerator
from app.generation.factory import DocumentGeneratorFactory, ModelClientFactory
from app.generation.generator import DocumentGenerator

__all__ = [
    "BaseDocumentGenerator",
    "DocumentGenerator",
    "DocumentGeneratorFactory",
    "ModelClientFactory",
]
