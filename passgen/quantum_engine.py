"""
Quantum random source: builds a circuit, puts qubits in superposition,
measures them in alternating bases and turns the measured bits into
unsigned integers for the password builder.
"""

from __future__ import annotations

import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import amplify_entropy, bits_to_int, combine_streams
from .errors import RandomSourceError

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.backend = AerSimulator()

        if self.config.num_qubits <= 0:
            raise ValueError("num_qubits must be positive")

        # Safety: ensure requested num_qubits does not exceed backend capability.
        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

        self._circuit = self._build_circuit()
        self._compiled = transpile(self._circuit, self.backend)
        logger.debug("quantum engine ready: %d qubits", self.config.num_qubits)

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits with an H gate each, then measure in alternating
        bases (Z, X, Z, X, ...).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        # Odd indices get a second H so they are measured in the X basis.
        for i in range(n):
            if i % 2 == 1:
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> List[int]:
        """
        Run the circuit once (single shot) and return one bit per qubit,
        index 0 being the first qubit.
        """
        result = self.backend.run(self._compiled, shots=1).result()
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}; qiskit orders bits as
        # [q_(n-1) ... q_0], so reverse.
        bitstring = next(iter(counts.keys()))[::-1]
        return [int(b) for b in bitstring]


class QuantumRandomSource:
    """
    RandomSource backed by QuantumEngine.

    Each draw runs ``quantum_streams`` independent circuits (repeating runs
    until every stream holds ``bits_per_draw`` bits), XOR-combines them,
    applies ``entropy_rounds`` of SHA-256 mixing and keeps the first
    ``bits_per_draw`` bits. Leftover bits are discarded, never carried over.
    """

    def __init__(
        self,
        config: QuantumSourceConfig | None = None,
        engine: QuantumEngine | None = None,
    ) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        if self.config.bits_per_draw <= 0:
            raise ValueError("bits_per_draw must be positive")
        self.engine = engine or QuantumEngine(self.config)

    def _stream(self) -> List[int]:
        needed = self.config.bits_per_draw
        bits: List[int] = []
        while len(bits) < needed:
            bits.extend(self.engine.get_raw_bits())
        return bits[:needed]

    def next_random_integer(self) -> int:
        streams = max(1, self.config.quantum_streams)
        try:
            combined = combine_streams([self._stream() for _ in range(streams)])
        except ValueError as exc:
            raise RandomSourceError(str(exc)) from exc

        mixed = amplify_entropy(combined, self.config.entropy_rounds)
        return bits_to_int(mixed[: self.config.bits_per_draw])

    def __repr__(self) -> str:
        return (
            f"QuantumRandomSource(num_qubits={self.config.num_qubits}, "
            f"streams={self.config.quantum_streams}, "
            f"rounds={self.config.entropy_rounds})"
        )
