"""QPerformance: quiz performance report runner."""
