"""Benchmark harness: timing (`measure`) and experiment sweeps (`runner`)."""
