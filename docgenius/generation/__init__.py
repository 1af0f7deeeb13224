from docgenius.generation.base import BaseTextGenerator
from docgenius.generation.factory import GeneratorFactory
from docgenius.generation.generator import TextGenerator

__all__ = ["BaseTextGenerator", "GeneratorFactory", "TextGenerator"]
