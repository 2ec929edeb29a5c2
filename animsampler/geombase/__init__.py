"""
Базовые геометрические классы (Geometric Base).

- GeneralPose3 - позы с масштабированием (translation + quaternion + scale)
"""

from .general_pose3 import GeneralPose3

__all__ = [
    'GeneralPose3',
]
