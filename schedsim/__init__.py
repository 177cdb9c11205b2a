"""CPU scheduling simulations (batch, preemptive, real-time) and semaphore-based synchronisation demos."""

__version__ = "0.1.0"

__all__ = ["batch", "preemptive", "realtime", "sync", "cli"]