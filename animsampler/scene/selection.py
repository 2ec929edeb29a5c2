from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from .interfaces import SceneGraph


@contextmanager
def selected_clip(scene: SceneGraph, clip) -> Iterator[None]:
    """
    Select clip as the scene's current one for the duration of the block.

    The selector is shared by every evaluator call of the scene, so blocks
    must not be interleaved. The previous selection is restored on exit.
    """
    previous = scene.current_clip
    scene.set_current_clip(clip)
    try:
        yield
    finally:
        scene.set_current_clip(previous)
