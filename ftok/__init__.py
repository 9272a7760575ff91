# ftok/__init__.py
from .config import TokenizerConfig, TokenizerMode, DataConfig
from .errors import FileAccessError
from .model import TokenizerModel
from .vocab import Vocabulary, SPECIALS
