"""Generator capabilities for the self-healing loop."""

from generation.dspy_generator import DspyGenerator, build_generator

__all__ = ["DspyGenerator", "build_generator"]
