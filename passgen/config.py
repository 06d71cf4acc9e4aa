"""
Configuration for the structured password generator.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationConfig:
    # Desired password length in characters. Zero yields an empty password.
    length: int = 16

    # When False, slots 0 and 3 fall back to the weighted class draw and
    # Special is rejected everywhere else.
    allow_special: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an integer, got {self.length!r}")
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")


@dataclass
class QuantumSourceConfig:
    # Number of qubits to prepare in superposition per circuit run.
    # Each qubit gives one raw bit.
    # NOTE: Keep this <= backend limit (often 20–29 for local simulators).
    num_qubits: int = 20

    # How many rounds of entropy amplification (hash mixing) to apply.
    entropy_rounds: int = 2

    # Independent circuit runs XOR-combined into one bitstream.
    quantum_streams: int = 2

    # Width of every integer handed out by the source.
    bits_per_draw: int = 32


# Default configuration instances you can import elsewhere
DEFAULT_CONFIG = GenerationConfig()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
