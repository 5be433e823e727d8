from .access_results import AccessLine, EvictedPageTableEntry, TranslationResult
from .frame_table import FrameTable
from .translation_cache import TranslationCache
from .word_store import WordStore, WORD_SIZE

__all__ = ["AccessLine", "EvictedPageTableEntry", "TranslationResult", "FrameTable", "TranslationCache",
           "WordStore", "WORD_SIZE"]
