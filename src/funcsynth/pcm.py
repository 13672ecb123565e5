"""
Output sinks: 16-bit PCM byte streams and WAV files.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from __future__ import annotations

from typing import BinaryIO, Iterator, Optional, Union
from pathlib import Path

import numpy as np
import soundfile as sf
from numpy.typing import ArrayLike, NDArray

from funcsynth.signal_node import SignalNode
from funcsynth.record import Record
from funcsynth.filter_kernel import PCM16_SCALE
from funcsynth.config import get_sample_rate
from funcsynth.logger import get_logger

logger = get_logger(__name__)

# Samples per block when streaming a node
DEFAULT_BLOCK_SIZE = 4096


def to_pcm16(samples: ArrayLike) -> bytes:
    """
    Encode samples as little-endian signed 16-bit PCM.

    Samples are clipped to [-1, 1], scaled by 32767 and truncated toward
    zero.
    """
    data = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0) * PCM16_SCALE
    return data.astype("<i2").tobytes()


def write_pcm16(stream: BinaryIO, samples: ArrayLike) -> int:
    """
    Write samples to a binary stream as PCM16.

    Returns:
        Number of bytes written
    """
    data = to_pcm16(samples)
    stream.write(data)
    return len(data)


def stream_blocks(
    node: SignalNode,
    sample_rate: Optional[float] = None,
    duration: Optional[float] = None,
    block_size: int = DEFAULT_BLOCK_SIZE,
) -> Iterator[NDArray[np.float64]]:
    """
    Sample `node` block by block, starting at t = 0.

    Args:
        node: The SignalNode to stream
        sample_rate: Sample rate in Hz (default: config.get_sample_rate())
        duration: Total length in seconds, or None for an endless stream
        block_size: Samples per yielded block (the last block may be shorter)

    Yields:
        float64 arrays of samples
    """
    if sample_rate is None:
        sample_rate = get_sample_rate()
    if block_size <= 0:
        raise ValueError(f"block_size must be positive (got {block_size})")
    total = None if duration is None else int(duration * sample_rate)

    start = 0
    while total is None or start < total:
        count = block_size if total is None else min(block_size, total - start)
        times = np.arange(start, start + count, dtype=np.float64) / float(sample_rate)
        yield node.sample(times)
        start += count


def write_wav(path: Union[str, Path], record: Record, subtype: str = "PCM_16") -> None:
    """
    Write a Record to a WAV file.

    Args:
        path: Output file path
        record: The rendered buffer
        subtype: soundfile subtype (default: 'PCM_16')
    """
    data = np.clip(record.samples, -1.0, 1.0)
    sf.write(str(path), data, int(record.sample_rate), subtype=subtype)
    logger.info(f"Wrote {len(record)} samples to {path} ({subtype})")
