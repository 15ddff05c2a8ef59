"""Tests for bitrate variation detection and the bitrate timeline."""

import pytest

from mediaparser.detectors import detect_bitrate_variations, generate_bitrate_timeline
from mediaparser.detectors.bitrate import iter_windows
from mediaparser.models import Category, PacketInfo, Severity


class TestBitrateVariations:
    """Test detect_bitrate_variations."""

    def test_fewer_than_two_packets(self, make_packets):
        """Test that 0 or 1 packets produce no problems."""
        assert detect_bitrate_variations([]) == []
        assert detect_bitrate_variations(make_packets([(0.0, 5_000_000)])) == []

    def test_no_closed_window(self, make_packets):
        """Test that packets inside the first window are not scored."""
        packets = make_packets([(0.0, 1000), (0.5, 900_000)])
        assert detect_bitrate_variations(packets) == []

    def test_empty_packets_do_not_divide_by_zero(self, make_packets):
        """Test that zero-size packets yield no windows and no problems."""
        packets = make_packets([(i * 0.6, 0) for i in range(10)])
        assert detect_bitrate_variations(packets) == []

    def test_uniform_bitrate(self, make_packets):
        """Test that constant size and spacing produce no problems."""
        packets = make_packets([(i / 10, 1000) for i in range(100)])
        assert detect_bitrate_variations(packets) == []

    def test_spike_and_high_variance(self, make_packets):
        """Test windows of 1, 1, 1, 1 and 10 Mbps.

        Mean is 2.8 Mbps, so only the last window exceeds 2.5x the mean,
        and the coefficient of variation is well above 0.3. The final
        packet only closes the 10 Mbps window.
        """
        packets = make_packets(
            [
                (0.0, 125_000),
                (1.5, 125_000),
                (3.0, 125_000),
                (4.5, 125_000),
                (6.0, 1_250_000),
                (7.5, 1),
            ]
        )

        problems = detect_bitrate_variations(packets)

        assert [p.code for p in problems] == ["BITRATE_HIGH_VARIANCE", "BITRATE_SPIKE"]
        assert all(p.severity == Severity.WARNING for p in problems)
        assert all(p.category == Category.BITRATE for p in problems)

        variance, spike = problems
        assert variance.details == "Average: 2.80 Mbps, StdDev: 3.60 Mbps"
        assert variance.timestamp == 0.0
        assert spike.timestamp == pytest.approx(4.0)
        assert "10.00 Mbps" in spike.details

    def test_spike_timestamp_uses_window_index(self, make_packets):
        """Test that spike time is index * width, not the packet PTS."""
        packets = make_packets(
            [(0.0, 1000), (2.0, 1000), (4.0, 1000), (6.0, 1000), (8.0, 50_000), (10.0, 1)]
        )

        spikes = [p for p in detect_bitrate_variations(packets) if p.code == "BITRATE_SPIKE"]

        assert len(spikes) == 1
        assert spikes[0].timestamp == pytest.approx(4.0)

    def test_input_is_not_modified(self, make_packets):
        """Test that analysis leaves the packet list untouched."""
        packets = make_packets([(0.0, 10), (1.5, 10_000), (3.0, 10)])
        before = [p.model_copy() for p in packets]
        detect_bitrate_variations(packets)
        assert packets == before


class TestIterWindows:
    """Test window accumulation."""

    def test_anchor_to_packet(self, make_packets):
        """Test that the crossing packet anchors the next window."""
        packets = make_packets([(0.0, 1), (0.5, 1), (1.7, 2), (2.9, 3), (3.0, 4)])

        windows = list(iter_windows(packets, 1.0, anchor_to_packet=True))

        assert windows == [(0.0, 2), (1.7, 2)]

    def test_include_partial(self, make_packets):
        """Test that the open window is only yielded on request."""
        packets = make_packets([(0.0, 1), (1.5, 2)])

        assert list(iter_windows(packets, 1.0)) == [(0.0, 1)]
        assert list(iter_windows(packets, 1.0, include_partial=True)) == [(0.0, 1), (1.0, 2)]


class TestBitrateTimeline:
    """Test generate_bitrate_timeline."""

    def test_empty_input(self):
        """Test that no packets produce no points."""
        assert generate_bitrate_timeline([], 1.0) == []

    @pytest.mark.parametrize("window_size", [0, -1.0])
    def test_non_positive_window(self, make_packets, window_size):
        """Test that a window size <= 0 produces no points."""
        packets = make_packets([(0.0, 1000), (1.5, 1000)])
        assert generate_bitrate_timeline(packets, window_size) == []

    def test_points_include_final_window(self, make_packets):
        """Test one point per window including the last partial one."""
        packets = make_packets([(0.0, 1000), (0.5, 1000), (1.5, 2000), (2.2, 500)])

        timeline = generate_bitrate_timeline(packets, 1.0)

        assert [(p.time, p.bitrate) for p in timeline] == [
            (0.0, 16000.0),
            (1.0, 16000.0),
            (2.0, 4000.0),
        ]
        assert all(p.type == "total" for p in timeline)

    def test_single_packet(self):
        """Test that a single packet yields one point."""
        timeline = generate_bitrate_timeline([PacketInfo(pts=0.2, size=250)], 0.5)

        assert len(timeline) == 1
        assert timeline[0].bitrate == 250 * 8 / 0.5

    def test_window_advances_by_one_width(self, make_packets):
        """Test that a long gap moves the window start by a single width."""
        packets = make_packets([(0.0, 100), (5.0, 100)])

        timeline = generate_bitrate_timeline(packets, 1.0)

        assert [p.time for p in timeline] == [0.0, 1.0]

    def test_default_window(self, make_packets):
        """Test the default window size of one second."""
        packets = make_packets([(0.0, 125_000), (1.5, 125_000)])

        timeline = generate_bitrate_timeline(packets)

        assert timeline[0].mbps == pytest.approx(1.0)
