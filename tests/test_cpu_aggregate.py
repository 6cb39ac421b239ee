"""Tests for grouping per-core CPU samples by brand."""

import unittest

from hostfetch.models import RawCpuSample
from hostfetch.report.cpu import aggregate


def _sample(brand, usage=0.0, freq=0.0):
    return RawCpuSample(brand_name=brand, usage_percent=usage, frequency_mhz=freq)


class TestAggregate(unittest.TestCase):
    def test_empty_input(self):
        self.assertEqual(aggregate([]), {})

    def test_singleton_group_keeps_exact_usage(self):
        groups = aggregate([_sample("Model X", 37.25, 2400.0)])
        self.assertEqual(groups["Model X"].num_cores, 1)
        self.assertEqual(groups["Model X"].avg_usage, 37.25)
        self.assertEqual(groups["Model X"].max_frequency_mhz, 2400.0)

    def test_average_and_peak_frequency(self):
        groups = aggregate([
            _sample("Model X", 10.0, 2000.0),
            _sample("Model X", 30.0, 3500.0),
            _sample("Model X", 50.0, 3000.0),
            _sample("Model X", 70.0, 1200.0),
        ])
        g = groups["Model X"]
        self.assertEqual(g.num_cores, 4)
        self.assertAlmostEqual(g.avg_usage, 40.0)
        self.assertEqual(g.max_frequency_mhz, 3500.0)

    def test_brands_form_separate_groups(self):
        samples = [
            _sample("P-core", 80.0, 5000.0),
            _sample("E-core", 20.0, 3800.0),
            _sample("P-core", 60.0, 4800.0),
        ]
        groups = aggregate(samples)
        self.assertEqual(set(groups), {"P-core", "E-core"})
        self.assertEqual(groups["P-core"].num_cores, 2)
        self.assertAlmostEqual(groups["P-core"].avg_usage, 70.0)
        self.assertEqual(groups["E-core"].num_cores, 1)

    def test_brand_match_is_exact(self):
        groups = aggregate([
            _sample("Model X"),
            _sample("model x"),
            _sample("Model X "),
        ])
        self.assertEqual(len(groups), 3)

    def test_total_core_count_preserved(self):
        samples = [_sample(f"brand-{i % 3}", float(i)) for i in range(17)]
        groups = aggregate(samples)
        self.assertEqual(sum(g.num_cores for g in groups.values()), len(samples))

    def test_zero_frequency_reported_as_zero(self):
        groups = aggregate([_sample("Model X", 5.0, 0.0)])
        self.assertEqual(groups["Model X"].max_frequency_mhz, 0.0)


if __name__ == "__main__":
    unittest.main()
