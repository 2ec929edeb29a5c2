"""GeneralPose3 - 3D pose with scale, the engine side transform representation.

Matrix convention:
    as_matrix() = T * R * S, column vectors, translation in the last column.
"""

import numpy
from animsampler.util import qslerp


class GeneralPose3:
    """A 3D Pose with scale, represented by rotation quaternion, translation vector, and scale."""

    __slots__ = ('ang', 'lin', 'scale', '_rot_matrix', '_mat')

    def __init__(
        self,
        ang: numpy.ndarray = None,
        lin: numpy.ndarray = None,
        scale: numpy.ndarray = None
    ):
        if ang is None:
            ang = numpy.array([0.0, 0.0, 0.0, 1.0])
        if lin is None:
            lin = numpy.array([0.0, 0.0, 0.0])
        if scale is None:
            scale = numpy.array([1.0, 1.0, 1.0])
        self.ang = numpy.asarray(ang, dtype=numpy.float64)
        self.lin = numpy.asarray(lin, dtype=numpy.float64)
        self.scale = numpy.asarray(scale, dtype=numpy.float64)
        self._rot_matrix = None
        self._mat = None

    @staticmethod
    def identity() -> 'GeneralPose3':
        return GeneralPose3(
            ang=numpy.array([0.0, 0.0, 0.0, 1.0]),
            lin=numpy.array([0.0, 0.0, 0.0]),
            scale=numpy.array([1.0, 1.0, 1.0])
        )

    def rotation_matrix(self) -> numpy.ndarray:
        """Get the 3x3 rotation matrix corresponding to the pose's orientation."""
        if self._rot_matrix is None:
            x, y, z, w = self.ang
            self._rot_matrix = numpy.array([
                [1 - 2*(y**2 + z**2), 2*(x*y - z*w), 2*(x*z + y*w)],
                [2*(x*y + z*w), 1 - 2*(x**2 + z**2), 2*(y*z - x*w)],
                [2*(x*z - y*w), 2*(y*z + x*w), 1 - 2*(x**2 + y**2)]
            ])
        return self._rot_matrix

    def as_matrix(self) -> numpy.ndarray:
        """Get the 4x4 transformation matrix with scale baked in.

        Returns TRS matrix: Translation * Rotation * Scale
        """
        if self._mat is None:
            R = self.rotation_matrix()
            S = numpy.diag(self.scale)
            self._mat = numpy.eye(4)
            self._mat[:3, :3] = R @ S
            self._mat[:3, 3] = self.lin
        return self._mat

    def __repr__(self):
        return f"GeneralPose3(ang={self.ang}, lin={self.lin}, scale={self.scale})"

    @staticmethod
    def translation(x: float, y: float, z: float) -> 'GeneralPose3':
        """Create a translation pose."""
        return GeneralPose3(lin=numpy.array([x, y, z]))

    @staticmethod
    def lerp(gp1: 'GeneralPose3', gp2: 'GeneralPose3', t: float) -> 'GeneralPose3':
        """Linearly interpolate between two poses."""
        lerped_ang = qslerp(gp1.ang, gp2.ang, t)
        lerped_lin = (1 - t) * gp1.lin + t * gp2.lin
        lerped_scale = (1 - t) * gp1.scale + t * gp2.scale
        return GeneralPose3(ang=lerped_ang, lin=lerped_lin, scale=lerped_scale)

