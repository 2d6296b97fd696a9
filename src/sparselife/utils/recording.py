"""
HDF5 storage for simulation trajectories.

Each generation is stored sparsely as an ``(n, 2)`` array of ``(x, y)``
coordinates under ``generations/<index>``; grid bounds and metadata are
kept as file attributes.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import h5py
import numpy as np

from ..core.engine import LiveSet
from ..core.neighborhood import Bounds, BoundsLike, Coordinate, as_bounds

logger = logging.getLogger(__name__)

GROUP = 'generations'
RESERVED_ATTRS = ('width', 'height', 'num_generations')


def cells_to_array(live: Iterable[Sequence[int]]) -> np.ndarray:
    """Return live cells as a sorted ``(n, 2)`` int32 array."""
    cells = sorted((int(x), int(y)) for x, y in live)
    if not cells:
        return np.zeros((0, 2), dtype=np.int32)
    return np.array(cells, dtype=np.int32)


def array_to_cells(array: np.ndarray) -> LiveSet:
    """Inverse of :func:`cells_to_array`."""
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError(f"Expected an (n, 2) coordinate array, got shape {array.shape}")
    return frozenset(Coordinate(int(x), int(y)) for x, y in array)


def save_trajectory(file_path, generations: List[Iterable[Sequence[int]]],
                    bounds: BoundsLike, metadata: Optional[Dict] = None) -> None:
    """
    Save a list of generations to an HDF5 file.

    Args:
        file_path: Output file path
        generations: Live sets, initial generation first
        bounds: Grid ``(width, height)``
        metadata: Optional metadata stored as file attributes
    """
    bounds = as_bounds(bounds)
    reserved = sorted(set(metadata or ()) & set(RESERVED_ATTRS))
    if reserved:
        raise ValueError(f"Metadata keys {reserved} are reserved for the grid attributes")

    with h5py.File(file_path, 'w') as f:
        f.attrs['width'] = bounds.width
        f.attrs['height'] = bounds.height
        f.attrs['num_generations'] = len(generations)

        grp = f.create_group(GROUP)
        for index, live in enumerate(generations):
            data = cells_to_array(live)
            # gzip needs a non-empty chunk shape
            compression = 'gzip' if len(data) else None
            grp.create_dataset(str(index), data=data, compression=compression)

        if metadata:
            for key, value in metadata.items():
                f.attrs[key] = value

    logger.debug("saved %d generations to %s", len(generations), file_path)


def load_trajectory(file_path) -> Tuple[List[LiveSet], Bounds, Dict]:
    """
    Load a trajectory written by :func:`save_trajectory`.

    Returns:
        Tuple of (generations, bounds, metadata)
    """
    with h5py.File(file_path, 'r') as f:
        bounds = as_bounds((int(f.attrs['width']), int(f.attrs['height'])))
        grp = f[GROUP]
        generations = [array_to_cells(grp[str(i)][()]) for i in range(len(grp))]
        metadata = {key: value for key, value in f.attrs.items()
                    if key not in RESERVED_ATTRS}

    logger.debug("loaded %d generations from %s", len(generations), file_path)
    return generations, bounds, metadata


class TrajectoryDataset:
    """
    Lazy, indexable view of a trajectory file.

    The file is opened per access so instances can be shared between
    worker processes.
    """

    def __init__(self, file_path):
        self.file_path = Path(file_path)

        with h5py.File(self.file_path, 'r') as f:
            self.length = len(f[GROUP])
            self.bounds = as_bounds((int(f.attrs['width']), int(f.attrs['height'])))

    def __len__(self):
        return self.length

    def __getitem__(self, idx) -> LiveSet:
        if idx < 0:
            idx += self.length
        if not 0 <= idx < self.length:
            raise IndexError(f"Generation {idx} out of range for {self.length} generations")

        with h5py.File(self.file_path, 'r') as f:
            return array_to_cells(f[GROUP][str(idx)][()])
