"""Sampling of a single scene property into a RawTrack."""

from __future__ import annotations

from animsampler import log
from animsampler.errors import (
    NodeNotFoundError,
    PropertyNotFoundError,
    PropertyReadError,
    StructuralInvariantError,
    UnsupportedValueKindError,
)
from animsampler.scene import AnimEvaluator, SceneGraph, selected_clip
from .raw_track import Interpolation, RawTrack
from .sampling import SamplingInfo
from .values import VALUE_TYPES, ValueType


def _read(evaluator: AnimEvaluator, prop, t: float, value_type: ValueType):
    raw = evaluator.property_value(prop, t)
    try:
        return value_type.read(raw, prop.kind)
    except PropertyReadError as e:
        log.error(e, f'Failed to read property "{prop.name}" at t = {t}s')
        raise


def _extract_curve(
    evaluator: AnimEvaluator,
    prop,
    value_type: ValueType,
    info: SamplingInfo,
) -> RawTrack:
    track = RawTrack(value_type, name=prop.name)

    if not prop.is_animated:
        # Constant value: a single step key.
        track.push(Interpolation.STEP, 0.0, _read(evaluator, prop, 0.0, value_type))
    else:
        track.reserve(info.estimated_key_count())
        for t in info.times():
            value = _read(evaluator, prop, t, value_type)
            track.push(Interpolation.LINEAR, (t - info.start) / info.duration, value)

    if not track.validate():
        raise StructuralInvariantError(f'Extracted track "{prop.name}" is malformed')
    return track


def extract_property(scene: SceneGraph, info: SamplingInfo, prop) -> RawTrack:
    """
    Build the track of prop, dispatched on its declared kind.

    Raises UnsupportedValueKindError for kinds without a track encoding and
    PropertyReadError when the evaluated value cannot be read.
    """
    arity = prop.kind.arity
    if arity is None:
        error = UnsupportedValueKindError(prop.kind)
        log.error(str(error))
        raise error
    return _extract_curve(scene.evaluator, prop, VALUE_TYPES[arity], info)


def extract_track(
    scene: SceneGraph,
    info: SamplingInfo,
    node_name: str,
    property_name: str,
    clip=None,
) -> RawTrack:
    """
    Extract property_name of node node_name.

    When clip is given it is selected for the duration of the extraction,
    otherwise the scene's current clip is evaluated.
    """
    log.info(f'Extracting animation track "{node_name}:{property_name}"')

    node = scene.find_node_by_name(node_name)
    if node is None:
        error = NodeNotFoundError(node_name)
        log.error(str(error))
        raise error

    prop = scene.find_property(node, property_name)
    if prop is None:
        error = PropertyNotFoundError(property_name)
        log.error(str(error))
        raise error

    if clip is None:
        return extract_property(scene, info, prop)
    with selected_clip(scene, clip):
        return extract_property(scene, info, prop)
