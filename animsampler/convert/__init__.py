from animsampler.convert.transform_converter import AXIS_SYSTEMS, TransformConverter

__all__ = ["AXIS_SYSTEMS", "TransformConverter"]
