"""Counting core: engine, accumulator, input resolution and the runner."""
