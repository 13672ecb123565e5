"""
FilterKernel - an immutable FIR impulse response for block convolution.

Kernels are usually loaded from raw 16-bit PCM impulse-response files
(e.g. a concert hall response). load_kernel() caches each file for the
lifetime of the process, so repeated renders reuse both the samples and
their spectra.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from funcsynth.errors import ConfigurationError, ResourceError
from funcsynth.logger import get_logger

logger = get_logger(__name__)

# Full scale of a signed 16-bit sample
PCM16_SCALE = 32767.0


class FilterKernel:
    """
    An immutable impulse response plus its cached spectra.

    The default block size for convolution is twice the kernel length, and
    the spectrum for a block size is the real FFT of the zero-padded kernel.
    Spectra are computed on first request and reused afterwards.

    Args:
        samples: Impulse response samples (1D, at least one sample)
        name: Optional label used in logs and repr

    Example:
        identity = FilterKernel([1.0])
        hall = load_kernel("hall.raw")
        record.convolve(hall)
    """

    def __init__(self, samples: ArrayLike, name: Optional[str] = None):
        data = np.array(samples, dtype=np.float64).reshape(-1)
        if data.size == 0:
            raise ConfigurationError("FilterKernel requires at least one sample")
        data.setflags(write=False)
        self._samples = data
        self._name = name
        self._spectra: dict[int, NDArray[np.complex128]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_pcm16_bytes(cls, data: bytes, name: Optional[str] = None) -> FilterKernel:
        """
        Decode little-endian signed 16-bit PCM, normalized by 1/32767.

        Raises:
            ResourceError: If the byte count is odd (truncated sample)
        """
        if len(data) % 2 != 0:
            raise ResourceError(
                f"PCM16 data has odd length {len(data)}; last sample is truncated"
            )
        if len(data) == 0:
            raise ResourceError("PCM16 data is empty")
        values = np.frombuffer(data, dtype="<i2").astype(np.float64) / PCM16_SCALE
        return cls(values, name=name)

    @classmethod
    def from_pcm16_file(cls, path: Union[str, Path]) -> FilterKernel:
        """
        Load a raw little-endian 16-bit PCM impulse response file.

        Raises:
            ResourceError: If the file is missing, unreadable or truncated
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ResourceError(f"cannot read filter file {path}: {e}") from e
        kernel = cls.from_pcm16_bytes(data, name=str(path))
        logger.info(f"Loaded filter kernel {path} ({len(kernel)} samples)")
        return kernel

    @property
    def samples(self) -> NDArray[np.float64]:
        """The impulse response (read-only array)."""
        return self._samples

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def block_size(self) -> int:
        """Default convolution block size: twice the kernel length."""
        return 2 * len(self._samples)

    def spectrum(self, block_size: Optional[int] = None) -> NDArray[np.complex128]:
        """
        Return rfft(samples, n=block_size), computed once per block size.

        Args:
            block_size: Even FFT size >= len(kernel) (default: self.block_size)

        Raises:
            ConfigurationError: If block_size is odd or shorter than the kernel
        """
        if block_size is None:
            block_size = self.block_size
        block_size = int(block_size)
        if block_size < len(self._samples) or block_size % 2 != 0:
            raise ConfigurationError(
                f"block_size must be even and >= kernel length {len(self._samples)} "
                f"(got {block_size})"
            )
        with self._lock:
            spectrum = self._spectra.get(block_size)
            if spectrum is None:
                spectrum = np.fft.rfft(self._samples, n=block_size)
                spectrum.setflags(write=False)
                self._spectra[block_size] = spectrum
        return spectrum

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        label = f", name={self._name!r}" if self._name else ""
        return f"FilterKernel(length={len(self._samples)}{label})"


# Process-wide cache of kernels loaded from files, keyed by resolved path
_kernel_cache: dict[Path, FilterKernel] = {}
_kernel_cache_lock = threading.Lock()


def load_kernel(path: Union[str, Path]) -> FilterKernel:
    """
    Load a PCM16 filter file once and return the cached kernel afterwards.

    Raises:
        ResourceError: If the file is missing or truncated
    """
    key = Path(path).resolve()
    with _kernel_cache_lock:
        kernel = _kernel_cache.get(key)
        if kernel is None:
            kernel = FilterKernel.from_pcm16_file(key)
            _kernel_cache[key] = kernel
        else:
            logger.debug(f"Using cached filter kernel {key}")
    return kernel


def clear_kernel_cache() -> None:
    """Forget all kernels loaded by load_kernel()."""
    with _kernel_cache_lock:
        _kernel_cache.clear()
