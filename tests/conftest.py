import pytest
import funcsynth as fs
from funcsynth.filter_kernel import clear_kernel_cache


@pytest.fixture(autouse=True)
def _reset_config():
    fs.set_sample_rate(44100)
    fs.set_error_mode(fs.ErrorMode.STRICT)
    yield
    fs.set_sample_rate(44100)
    fs.set_error_mode(fs.ErrorMode.STRICT)
    clear_kernel_cache()
