from .qperf_engine import QperfExeEngine

__all__ = ["QperfExeEngine"]
