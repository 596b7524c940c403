from .metrics import EncoderMetrics, MetricsCollector

__all__ = ["EncoderMetrics", "MetricsCollector"]
