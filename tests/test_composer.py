"""Tests for report line composition and logo layout.

All tests operate on in-memory models — no terminal or host access needed.
"""

import unittest

from hostfetch.models import CpuGroup, GpuRecord, HostReport
from hostfetch.report.composer import LOGO, LOGO_WIDTH, compose, pair_with_logo, render


def _report(**overrides) -> HostReport:
    base = dict(
        username="alice",
        hostname="box",
        os_name="TestOS",
        serial_number="SN123",
        kernel_version="1.0",
        uptime_seconds=3725,
        cpu_groups={"Model X": CpuGroup(num_cores=4, avg_usage=50.0, max_frequency_mhz=3000.0)},
        gpus=(GpuRecord(device_index=0, display_name="Card (Discrete GPU)"),),
        memory_used_mb=1024,
        memory_total_mb=8192,
    )
    base.update(overrides)
    return HostReport(**base)


class TestCompose(unittest.TestCase):
    def test_end_to_end_lines(self):
        lines = compose(_report())
        self.assertEqual(lines, [
            "alice@box",
            "-------",
            "OS:        TestOS",
            "Serial:    SN123",
            "Kernel:    1.0",
            "Uptime:    1h 2m",
            "CPU:       Model X - 4 cores, 50.00% avg, 3000.00 MHz (max)",
            "GPU ..0:   Card (Discrete GPU)",
            "Memory:    1024/8192 MB used",
        ])

    def test_separator_length(self):
        lines = compose(_report(username="bob", hostname="workstation"))
        self.assertEqual(lines[1], "-" * len("bob@workstation"))

    def test_line_count(self):
        groups = {
            "A": CpuGroup(num_cores=2, avg_usage=1.0, max_frequency_mhz=1.0),
            "B": CpuGroup(num_cores=1, avg_usage=2.0, max_frequency_mhz=2.0),
            "C": CpuGroup(num_cores=1, avg_usage=3.0, max_frequency_mhz=3.0),
        }
        gpus = (
            GpuRecord(device_index=0, display_name="x"),
            GpuRecord(device_index=3, display_name="y"),
        )
        for cpu, gpu in ((groups, gpus), ({}, ()), (groups, ()), ({}, gpus)):
            lines = compose(_report(cpu_groups=cpu, gpus=gpu))
            self.assertEqual(len(lines), 6 + len(cpu) + len(gpu) + 1)

    def test_multiple_cpu_groups_any_order(self):
        groups = {
            "P-core": CpuGroup(num_cores=8, avg_usage=12.346, max_frequency_mhz=5100.0),
            "E-core": CpuGroup(num_cores=16, avg_usage=3.0, max_frequency_mhz=3900.5),
        }
        cpu_lines = [l for l in compose(_report(cpu_groups=groups)) if l.startswith("CPU:")]
        self.assertCountEqual(cpu_lines, [
            "CPU:       P-core - 8 cores, 12.35% avg, 5100.00 MHz (max)",
            "CPU:       E-core - 16 cores, 3.00% avg, 3900.50 MHz (max)",
        ])

    def test_gpu_index_padding_and_order(self):
        gpus = (
            GpuRecord(device_index=12, display_name="late"),
            GpuRecord(device_index=2, display_name="early"),
            GpuRecord(device_index=123, display_name="wide"),
        )
        gpu_lines = [l for l in compose(_report(gpus=gpus)) if l.startswith("GPU")]
        self.assertEqual(gpu_lines, [
            "GPU ..2:   early",
            "GPU .12:   late",
            "GPU 123:   wide",
        ])

    def test_no_cpu_or_gpu(self):
        lines = compose(_report(cpu_groups={}, gpus=()))
        self.assertEqual(lines[-1], "Memory:    1024/8192 MB used")
        self.assertEqual(lines[-2], "Uptime:    1h 2m")


class TestPairWithLogo(unittest.TestCase):
    def test_logo_shape(self):
        self.assertEqual(len(LOGO), 9)
        for row in LOGO:
            self.assertEqual(len(row), LOGO_WIDTH)

    def test_fewer_lines_than_logo(self):
        rows = pair_with_logo(["one", "two"])
        self.assertEqual(len(rows), len(LOGO))
        self.assertEqual(rows[0], LOGO[0] + "one")
        self.assertEqual(rows[1], LOGO[1] + "two")
        self.assertEqual(rows[2:], list(LOGO[2:]))

    def test_more_lines_than_logo(self):
        lines = [f"line {i}" for i in range(len(LOGO) + 3)]
        rows = pair_with_logo(lines)
        self.assertEqual(len(rows), len(lines))
        self.assertEqual(rows[len(LOGO) - 1], LOGO[-1] + f"line {len(LOGO) - 1}")
        self.assertEqual(rows[len(LOGO)], " " * LOGO_WIDTH + f"line {len(LOGO)}")

    def test_exact_fit(self):
        rows = pair_with_logo(["x"] * len(LOGO))
        self.assertEqual(rows, [row + "x" for row in LOGO])

    def test_custom_block(self):
        rows = pair_with_logo(["a", "b", "c"], logo=("##", "##"), width=2)
        self.assertEqual(rows, ["##a", "##b", "  c"])

    def test_overflow_pads_to_width(self):
        rows = pair_with_logo(["a", "b"], logo=("#",), width=4)
        self.assertEqual(rows, ["#a", "    b"])


class TestRender(unittest.TestCase):
    def test_framed_by_blank_lines(self):
        text = render(_report())
        self.assertTrue(text.startswith("\n"))
        self.assertTrue(text.endswith("\n\n"))
        body = text.split("\n")[1:-2]
        self.assertEqual(len(body), len(LOGO))
        self.assertEqual(body[0], LOGO[0] + "alice@box")
        self.assertEqual(body[-1], LOGO[-1] + "Memory:    1024/8192 MB used")


if __name__ == "__main__":
    unittest.main()
