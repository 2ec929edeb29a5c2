"""
Animsampler - запекание анимационных кривых сцены в ключевые кадры движка.

Основные модули:
- animation - SamplingInfo, треки суставов и свойств, пакетное извлечение клипов
- scene - интерфейсы сцены и in-memory реализация
- skeleton - кости и bind pose
- convert - конвертация матриц в GeneralPose3
"""

from .animation import (
    RawAnimation,
    RawTrack,
    SamplingInfo,
    extract_animation,
    extract_animations,
    extract_sampling_info,
    extract_track,
)
from .errors import ExtractionError

__version__ = '0.1.0'

__all__ = [
    'ExtractionError',
    'RawAnimation',
    'RawTrack',
    'SamplingInfo',
    'extract_animation',
    'extract_animations',
    'extract_sampling_info',
    'extract_track',
]
