import pytest

from syslab.fcyc import FcycConfig, KBestSampler, fcyc


class ScriptedCounter:
    def __init__(self, readings):
        self._readings = iter(readings)
        self.starts = 0

    def start(self):
        self.starts += 1

    def get(self):
        return next(self._readings)


def test_sampler_keeps_k_smallest_sorted():
    sampler = KBestSampler(3, 0.01)
    for val in (5.0, 3.0, 4.0, 1.0, 9.0):
        sampler.add_sample(val)
    assert sampler.values == [1.0, 3.0, 4.0]
    assert sampler.samplecount == 5
    assert sampler.best == 1.0


def test_sampler_converges_within_epsilon():
    sampler = KBestSampler(3, 0.01)
    sampler.add_sample(100.0)
    sampler.add_sample(100.5)
    assert not sampler.has_converged()
    sampler.add_sample(100.9)
    assert sampler.has_converged()


def test_sampler_not_converged_when_spread():
    sampler = KBestSampler(2, 0.01)
    sampler.add_sample(100.0)
    sampler.add_sample(150.0)
    assert not sampler.has_converged()


def test_fcyc_stops_when_converged():
    counter = ScriptedCounter([100.0, 100.0, 100.0, 1.0])
    seen = []
    result = fcyc(seen.append, "arg", FcycConfig(), counter)
    assert result == 100.0
    assert seen == ["arg", "arg", "arg"]
    assert counter.starts == 3


def test_fcyc_gives_up_after_maxsamples():
    counter = ScriptedCounter([float(v) for v in range(50, 0, -5)] + [999.0] * 10)
    calls = []
    result = fcyc(calls.append, None, FcycConfig(k=3, maxsamples=4), counter)
    assert len(calls) == 4
    assert result == 35.0


def test_fcyc_ignores_non_positive_readings():
    counter = ScriptedCounter([0.0, -3.0, 7.0, 7.0, 7.0])
    calls = []
    result = fcyc(calls.append, 1, FcycConfig(), counter)
    assert result == 7.0
    assert len(calls) == 5


def test_fcyc_with_cache_clearing():
    config = FcycConfig(clear_cache=True, cache_bytes=4096, cache_block=64)
    counter = ScriptedCounter([10.0, 10.0, 10.0])
    assert fcyc(lambda p: None, None, config, counter) == 10.0


def test_fcyc_with_real_counter():
    result = fcyc(lambda n: sum(range(n)), 5000, FcycConfig(maxsamples=5))
    assert result > 0.0


def test_config_defaults_from_source():
    config = FcycConfig()
    assert (config.k, config.maxsamples, config.cache_bytes, config.cache_block) == (
        3,
        20,
        1 << 19,
        32,
    )
    assert config.epsilon == pytest.approx(0.01)