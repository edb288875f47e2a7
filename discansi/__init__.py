"""discansi - format text for Discord ansi code blocks."""

from .applicator import apply_style, replace_text, reset_all
from .encoder import EffectiveState, encode, encode_stream
from .history import History, HistoryState
from .model import Document, LineBreak, Span, Text
from .session import FormatterSession
from .styles import Band, InvalidStyleError

__all__ = [
    'Band',
    'Document',
    'EffectiveState',
    'FormatterSession',
    'History',
    'HistoryState',
    'InvalidStyleError',
    'LineBreak',
    'Span',
    'Text',
    'apply_style',
    'encode',
    'encode_stream',
    'replace_text',
    'reset_all',
]
