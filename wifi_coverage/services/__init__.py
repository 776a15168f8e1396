# Propagation and metrics services
from wifi_coverage.services.geometry import (
    distance, point_to_segment_distance, segments_intersect, rotate_point
)
from wifi_coverage.services.propagation import (
    estimate_signal, estimate_range, coverage_radius_meters
)
from wifi_coverage.services.throughput import estimate_throughput
from wifi_coverage.services.quantizer import (
    signal_to_color, throughput_to_color, signal_to_rgb, throughput_to_rgb
)
from wifi_coverage.services.coverage import (
    CoverageEngine, SignalGrid, MetricMode, best_signal_at, best_throughput_at
)
