"""
Record - renders a signal node into a sample buffer.

A Record is both the output of rendering and a SignalNode in its own right
(buffer playback), so a rendered and filtered piece can be fed back into
the node algebra or streamed to a sink.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from funcsynth.signal_node import SignalNode, SourceNode
from funcsynth.filter_kernel import FilterKernel
from funcsynth.config import get_sample_rate, handle_error
from funcsynth.errors import ConfigurationError, RenderError
from funcsynth.logger import get_logger

logger = get_logger(__name__)

# Number of samples evaluated per vectorized call when rendering
DEFAULT_CHUNK_SIZE = 1 << 16

# Sample times are snapped to the grid before flooring, so that sampling
# a Record at i / sample_rate always returns sample i.
_GRID_EPSILON = 1e-9


class Record(SourceNode):
    """
    A fixed-length buffer of samples at a given sample rate.

    As a SignalNode, sample(t) returns the sample at index floor(t * rate),
    or 0.0 for indices outside the buffer (negative t or t past the end).

    Records are created by Record.record() (rendering a node) or
    Record.from_samples(). The buffer is only modified by convolve().

    Args:
        samples: 1D array of samples
        sample_rate: Sample rate in Hz

    Example:
        song = compile_mml(MARIO, DummyInstrument())
        buffer = Record.record(song, 44100, 20.0)
        buffer.convolve(load_kernel("hall.raw"))
    """

    def __init__(self, samples: ArrayLike, sample_rate: float):
        if sample_rate <= 0:
            raise ConfigurationError(f"sample_rate must be positive (got {sample_rate})")
        self._samples = np.array(samples, dtype=np.float64).reshape(-1)
        self._sample_rate = float(sample_rate)

    @classmethod
    def record(
        cls,
        node: SignalNode,
        sample_rate: Optional[float] = None,
        duration: float = 1.0,
        *,
        workers: Optional[int] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> Record:
        """
        Sample `node` at int(duration * sample_rate) instants i / sample_rate.

        Each sample depends only on its own time, so the buffer is filled
        chunk by chunk with vectorized evaluation. With workers > 1 the
        chunks are evaluated on a thread pool and gathered in order.

        Args:
            node: The SignalNode to render
            sample_rate: Sample rate in Hz (default: config.get_sample_rate())
            duration: Length in seconds
            workers: Number of worker threads (default: render on the
                calling thread)
            chunk_size: Samples per vectorized evaluation

        Raises:
            ConfigurationError: For a non-positive rate or chunk size, or a
                negative duration
        """
        if sample_rate is None:
            sample_rate = get_sample_rate()
        if sample_rate <= 0:
            raise ConfigurationError(f"sample_rate must be positive (got {sample_rate})")
        if duration < 0:
            raise ConfigurationError(f"duration must be non-negative (got {duration})")
        if chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be positive (got {chunk_size})")

        count = int(duration * sample_rate)
        times = np.arange(count, dtype=np.float64) / float(sample_rate)
        chunks = [times[i:i + chunk_size] for i in range(0, count, chunk_size)]

        logger.debug(
            f"Recording {node.__class__.__name__}: {count} samples at {sample_rate} Hz "
            f"in {len(chunks)} chunks"
        )

        if not chunks:
            samples = np.zeros(0, dtype=np.float64)
        elif workers is not None and workers > 1 and len(chunks) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                samples = np.concatenate(list(pool.map(node.sample, chunks)))
        else:
            samples = np.concatenate([node.sample(chunk) for chunk in chunks])

        return cls(samples, sample_rate)

    @classmethod
    def from_samples(cls, samples: ArrayLike, sample_rate: float) -> Record:
        """Wrap an existing sample array (copied) as a Record."""
        return cls(samples, sample_rate)

    @property
    def sample_rate(self) -> float:
        """Sample rate in Hz."""
        return self._sample_rate

    @property
    def samples(self) -> NDArray[np.float64]:
        """Read-only view of the sample buffer."""
        view = self._samples.view()
        view.setflags(write=False)
        return view

    @property
    def duration(self) -> float:
        """Buffer length in seconds."""
        return len(self._samples) / self._sample_rate

    def __len__(self) -> int:
        return len(self._samples)

    def _sample(self, t: np.ndarray) -> np.ndarray:
        index = np.floor(t * self._sample_rate + _GRID_EPSILON)
        valid = (index >= 0) & (index < len(self._samples))
        safe_index = np.where(valid, index, 0).astype(np.int64)
        if len(self._samples) == 0:
            return np.zeros(np.shape(t), dtype=np.float64)
        return np.where(valid, self._samples[safe_index], 0.0)

    def convolve(
        self,
        kernel: Union[FilterKernel, ArrayLike],
        *,
        overlap_add: bool = False,
    ) -> None:
        """
        Filter the buffer in place by FFT block convolution.

        `kernel` is either a FilterKernel or a precomputed kernel spectrum
        (the rfft of the zero-padded kernel). The block length is
        2 * (len(spectrum) - 1). The buffer is zero-padded to a multiple of
        the block length; every block is transformed, multiplied by the
        spectrum and transformed back.

        By default blocks are processed independently and nothing is carried
        between them: the kernel's tail wraps around inside each block
        instead of spilling into the next one. This is an approximation,
        acceptable for a room-reverb color. Pass overlap_add=True (requires a
        FilterKernel) for exact linear convolution; the buffer then grows by
        len(kernel) - 1 samples.

        Raises:
            RenderError: If the spectrum implies a block shorter than 2
                samples, or overlap_add is requested without a FilterKernel
        """
        if isinstance(kernel, FilterKernel):
            spectrum = kernel.spectrum()
        else:
            spectrum = np.asarray(kernel, dtype=np.complex128).reshape(-1)
        block = 2 * (len(spectrum) - 1)
        if block < 2:
            handle_error(
                f"kernel spectrum of length {len(spectrum)} is too short for block convolution",
                fatal=True,
                exception_class=RenderError,
            )

        if overlap_add:
            if not isinstance(kernel, FilterKernel):
                handle_error(
                    "overlap_add convolution requires a FilterKernel, not a bare spectrum",
                    fatal=True,
                    exception_class=RenderError,
                )
            self._samples = self._overlap_add(kernel, spectrum, block)
        else:
            self._samples = self._convolve_blocks(spectrum, block)

        logger.debug(
            f"Convolved {len(self._samples)} samples with block size {block} "
            f"(overlap_add={overlap_add})"
        )

    # apply_filter is the name used by callers that treat the kernel as a filter
    apply_filter = convolve

    def _convolve_blocks(self, spectrum: np.ndarray, block: int) -> np.ndarray:
        padded_len = -(-len(self._samples) // block) * block
        padded = np.zeros(padded_len, dtype=np.float64)
        padded[:len(self._samples)] = self._samples
        if padded_len == 0:
            return padded

        blocks = padded.reshape(-1, block)
        filtered = np.fft.irfft(np.fft.rfft(blocks, axis=1) * spectrum, n=block, axis=1)
        return filtered.reshape(-1)

    def _overlap_add(self, kernel: FilterKernel, spectrum: np.ndarray, block: int) -> np.ndarray:
        tail = len(kernel) - 1
        hop = block - tail
        total = len(self._samples) + tail
        if len(self._samples) == 0:
            return np.zeros(0, dtype=np.float64)

        padded_len = -(-len(self._samples) // hop) * hop
        padded = np.zeros(padded_len, dtype=np.float64)
        padded[:len(self._samples)] = self._samples

        segments = padded.reshape(-1, hop)
        filtered = np.fft.irfft(np.fft.rfft(segments, n=block, axis=1) * spectrum, n=block, axis=1)

        output = np.zeros(padded_len + tail, dtype=np.float64)
        for i, segment in enumerate(filtered):
            output[i * hop:i * hop + block] += segment
        return output[:total]

    def __repr__(self) -> str:
        return f"Record(samples={len(self._samples)}, sample_rate={self._sample_rate})"
