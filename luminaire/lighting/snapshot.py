# luminaire/lighting/snapshot.py
"""
Light Snapshotting

Immutable copies of a light's committed attitude for the render side.

Key principles:
1. Snapshots are immutable once created
2. Snapshot creation happens on the thread that owns (mutates) the light
3. Readers on other threads only ever see snapshots, never the live light
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import threading
import time

import numpy as np

from ..core.math3d import Mat4


def _freeze(matrix: Mat4, dtype: str) -> bytes:
    return np.array(matrix.to_tuple(), dtype=dtype).tobytes()


@dataclass(frozen=True)
class LightSnapshot:
    """
    Complete immutable attitude of one light.

    Matrices are stored row-major as bytes of ``dtype``, matching the
    ndarrays returned by ``get_model_matrix``; ``uniform_bytes`` gives the
    column-major layout for GPU upload.
    view_matrix is None for lights without a cached view matrix.
    """
    snapshot_id: int
    timestamp: float
    dtype: str
    position: Tuple[float, float, float]
    forward: Tuple[float, float, float]
    right: Tuple[float, float, float]
    up: Tuple[float, float, float]
    rotation_axis: Tuple[float, float, float]
    model_matrix: bytes
    view_matrix: Optional[bytes] = None

    _next_snapshot_id = 0
    _snapshot_lock = threading.Lock()

    @classmethod
    def _get_next_id(cls) -> int:
        with cls._snapshot_lock:
            sid = LightSnapshot._next_snapshot_id
            LightSnapshot._next_snapshot_id += 1
            return sid

    @classmethod
    def from_light(cls, light, dtype: Optional[str] = None) -> LightSnapshot:
        """
        Freeze the current state of ``light``.

        Must be called between mutator calls, from the thread that owns the light.
        """
        if dtype is None:
            dtype = light.attitude.config.snapshot_dtype

        view_bytes = None
        if light.has_view_matrix:
            view_bytes = _freeze(light.view_matrix(), dtype)

        return cls(
            snapshot_id=cls._get_next_id(),
            timestamp=time.perf_counter(),
            dtype=dtype,
            position=light.position.to_tuple(),
            forward=light.forward_axis.to_tuple(),
            right=light.right_axis.to_tuple(),
            up=light.up_axis.to_tuple(),
            rotation_axis=light.rotation_axis.to_tuple(),
            model_matrix=_freeze(light.model_matrix(), dtype),
            view_matrix=view_bytes,
        )

    def get_model_matrix(self) -> np.ndarray:
        """Reconstruct numpy array from frozen bytes."""
        return np.frombuffer(self.model_matrix, dtype=self.dtype).reshape(4, 4).copy()

    def get_view_matrix(self) -> Optional[np.ndarray]:
        if self.view_matrix is None:
            return None
        return np.frombuffer(self.view_matrix, dtype=self.dtype).reshape(4, 4).copy()

    def get_position(self) -> np.ndarray:
        return np.array(self.position, dtype=self.dtype)

    def get_forward(self) -> np.ndarray:
        return np.array(self.forward, dtype=self.dtype)

    def uniform_bytes(self) -> bytes:
        """Column-major model and view matrices back to back, for GPU upload.

        An identity matrix stands in for a missing view matrix.
        """
        view = self.get_view_matrix()
        if view is None:
            view = np.eye(4, dtype=self.dtype)
        return (
            np.ascontiguousarray(self.get_model_matrix().T).tobytes()
            + np.ascontiguousarray(view.T).tobytes()
        )
