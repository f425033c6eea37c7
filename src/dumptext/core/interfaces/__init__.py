from .extractors import ExtractorProtocol, ExtractorRegistryProtocol, Probe
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .text import LineFilterProtocol
from .walker import WalkerProtocol

__all__ = [
    'ExtractorProtocol',
    'ExtractorRegistryProtocol',
    'Probe',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'LineFilterProtocol',
    'WalkerProtocol',
]
