"""Conversion of authoring-format matrices to engine GeneralPose3."""

from __future__ import annotations

import numpy as np
from scipy.spatial.transform import Rotation

from animsampler.errors import ConversionError
from animsampler.geombase import GeneralPose3

# Engine axis system is right-handed, Y up. Basis maps source axes onto it.
AXIS_SYSTEMS = {
    "y_up": np.eye(3),
    # (x, y, z) Z-up -> (x, z, -y)
    "z_up": np.array([
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, -1.0, 0.0],
    ]),
}

SCALE_EPSILON = 1e-6


class TransformConverter:
    """
    Converts a 4x4 affine matrix (column vectors, translation in the last
    column) expressed in the source axis/unit system to a GeneralPose3.

    Args:
        axis_system: key of AXIS_SYSTEMS describing the source scene
        unit_scale: source unit in engine units (0.01 for centimeters)
    """

    def __init__(self, axis_system: str = "y_up", unit_scale: float = 1.0):
        if axis_system not in AXIS_SYSTEMS:
            raise ValueError(f"Unknown axis system '{axis_system}'")
        if not unit_scale > 0.0:
            raise ValueError(f"unit_scale must be positive, got {unit_scale}")
        self.axis_system = axis_system
        self.unit_scale = float(unit_scale)

        basis = np.eye(4)
        basis[:3, :3] = AXIS_SYSTEMS[axis_system]
        self._basis = basis
        self._basis_inv = basis.T  # orthonormal

    def convert_matrix(self, matrix: np.ndarray) -> np.ndarray:
        """Express matrix in engine axes and units."""
        m = np.asarray(matrix, dtype=np.float64)
        if m.shape != (4, 4):
            raise ConversionError(f"Expected 4x4 matrix, got shape {m.shape}")
        m = self._basis @ m @ self._basis_inv
        m[:3, 3] *= self.unit_scale
        return m

    def convert(self, matrix: np.ndarray) -> GeneralPose3:
        """Decompose matrix into translation, rotation and scale.

        Raises ConversionError if the matrix is not finite or one of its
        axes is degenerate.
        """
        m = self.convert_matrix(matrix)
        if not np.all(np.isfinite(m)):
            raise ConversionError("Matrix contains non-finite values")

        translation = m[:3, 3].copy()
        rotation_matrix = m[:3, :3].copy()

        scale = np.linalg.norm(rotation_matrix, axis=0)
        if np.any(scale < SCALE_EPSILON):
            raise ConversionError(f"Degenerate scale {scale.tolist()}")
        rotation_matrix /= scale

        # Mirroring is carried by a negative X scale.
        if np.linalg.det(rotation_matrix) < 0.0:
            scale[0] = -scale[0]
            rotation_matrix[:, 0] = -rotation_matrix[:, 0]

        quat = Rotation.from_matrix(rotation_matrix).as_quat()  # [x, y, z, w]
        return GeneralPose3(ang=quat, lin=translation, scale=scale)

    def __repr__(self) -> str:
        return f"<TransformConverter axes={self.axis_system} unit_scale={self.unit_scale}>"
