import logging
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from pacing.model import Sample, SEED_SAMPLE


logger = logging.getLogger(__name__)


class HistoryBuffer:
    """
    Append-only run history, one Sample per tick.

    Starts with the seed sample at t=0. Samples are never reordered,
    replaced or pruned; the buffer grows for the lifetime of the session.
    """

    def __init__(self):
        self._samples: List[Sample] = [SEED_SAMPLE]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    def __getitem__(self, index):
        return self._samples[index]

    @property
    def latest(self) -> Sample:
        return self._samples[-1]

    def append(self, sample: Sample) -> None:
        """
        Add one sample at the end of the history.

        Raises:
            ValueError: if the sample's time does not follow the latest one
        """
        if sample.time <= self.latest.time:
            raise ValueError(
                f"Sample time {sample.time} does not follow latest time {self.latest.time}"
            )
        self._samples.append(sample)
        logger.debug(
            f"Sample #{len(self._samples) - 1}: t={sample.time}s "
            f"dist={sample.distance:.4f} ref={sample.reference_distance:.4f}"
        )

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Extract (times, distances, reference_distances) arrays for plotting.
        """
        return samples_to_arrays(self._samples)


def samples_to_arrays(samples: Sequence[Sample]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    times = np.array([s.time for s in samples], dtype=float)
    distances = np.array([s.distance for s in samples], dtype=float)
    references = np.array([s.reference_distance for s in samples], dtype=float)
    return times, distances, references
